"""Scanner creation workflow.

Wires the wizard to its collaborators:

1. LOOKUP   -- read the Access Analyzer endpoint and fetch existing scanner names.
2. WIZARD   -- collect and confirm a :class:`ScannerCreationData` record.
3. RENDER   -- build the artifact list for the chosen language.
4. WRITE    -- persist the artifacts when file generation was requested.

The lookup is advisory: a missing endpoint or an unreachable API is reported
as a warning and the wizard runs with an empty set of existing names.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from nwx.api_client import AccessAnalyzerClient
from nwx.config import Config, EndpointStore
from nwx.errors import ExternalLookupError, ValidationError
from nwx.models import ScannerCreationData
from nwx.scaffolder import ScaffoldWriter, TemplateCatalog
from nwx.utils import console as default_console
from nwx.utils import print_success, print_warning
from nwx.wizard import Prompter, WizardEngine

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, Config], AccessAnalyzerClient]

NO_ENDPOINT_MESSAGE = "no endpoint configured - use 'nwx aa config --endpoint=\"<url>\"'"


def default_client_factory(endpoint: str, config: Config) -> AccessAnalyzerClient:
    return AccessAnalyzerClient(endpoint, timeout=config.api_timeout, page_size=config.page_size)


class ScannerCreationWorkflow:
    """Runs one scanner creation from endpoint lookup to written scaffold.

    Attributes:
        config: Global CLI configuration.
        store: Endpoint store used to find the Access Analyzer API.
        catalog: Renders the artifact list for a confirmed record.
        writer: Writes the artifact list under the chosen output directory.
    """

    def __init__(
        self,
        config: Config,
        store: EndpointStore | None = None,
        prompter: Prompter | None = None,
        console: Console | None = None,
        client_factory: ClientFactory = default_client_factory,
        catalog: TemplateCatalog | None = None,
        writer: ScaffoldWriter | None = None,
    ) -> None:
        self.config = config
        self.store = store or EndpointStore(config)
        self.prompter = prompter
        self.console = console or default_console
        self.client_factory = client_factory
        self.catalog = catalog or TemplateCatalog()
        self.writer = writer or ScaffoldWriter(console=self.console)

    def run(self) -> ScannerCreationData:
        """Run the full workflow and return the confirmed record.

        Raises:
            CancellationError: If the user abandons or declines the wizard.
            ScaffoldWriteError: If the output directory or a file cannot be written.
        """
        self.console.print("[bold]🚀 Interactive Scanner Creation[/bold]")
        self.console.print("=" * 36)
        self.console.print()

        existing = self.fetch_existing_names()
        self.console.print()

        record = WizardEngine(existing, prompter=self.prompter, console=self.console).run()

        if record.generate_files:
            self.generate(record)
        else:
            print_success("✅ Scanner configuration completed!", out=self.console)
        return record

    def fetch_existing_names(self) -> set[str]:
        """Return the type names already registered with Access Analyzer.

        Any lookup failure is printed as a warning and yields an empty set.
        """
        try:
            endpoint = self.store.get_aa_endpoint()
            if not endpoint:
                raise ExternalLookupError(NO_ENDPOINT_MESSAGE)
            client = self.client_factory(endpoint, self.config)
            self.console.print(
                f"🔍 Connecting to Access Analyzer at: {escape(client.base_url)}"
            )
            response = client.get_source_types()
        except ExternalLookupError as exc:
            logger.debug("Existing scanner lookup failed: %s", exc)
            print_warning(
                f"⚠️  Could not fetch existing scanners: {escape(str(exc))}", out=self.console
            )
            return set()

        names = response.type_names()
        self.console.print(f"✅ Found {len(response.data)} existing scanners")
        return names

    def generate(self, record: ScannerCreationData) -> list[Path]:
        """Render and write the scaffold for *record*, then print the next steps.

        Raises:
            ValidationError: If *record* is incomplete or has no output directory.
        """
        if not record.output_dir:
            raise ValidationError("no output directory chosen for the scanner files")
        target = self.catalog.target_for(record.language)
        output_dir = escape(record.output_dir)

        self.console.print(f"🚀 Generating scanner files in: {output_dir}")
        artifacts = self.catalog.render(record)
        written = self.writer.write(record.output_dir, artifacts)

        self.console.print()
        print_success("✅ Scanner files generated successfully!", out=self.console)
        self.console.print()
        self.console.print("Next steps:")
        self.console.print(f"  1. cd {output_dir}")
        self.console.print("  2. Review and customize the generated files")
        self.console.print(f"  3. Update {target.source_file} with your specific implementation")
        self.console.print(
            f"  4. Test your scanner: docker build -t {escape(record.name)}-scanner ."
        )
        self.console.print("  5. Deploy to Access Analyzer")
        return written


def report_status(
    config: Config,
    store: EndpointStore | None = None,
    console: Console | None = None,
    client_factory: ClientFactory = default_client_factory,
) -> bool:
    """Test the configured Access Analyzer endpoint and print the outcome.

    Returns:
        ``True`` when the API answered the connection test.
    """
    out = console or default_console
    endpoint = (store or EndpointStore(config)).get_aa_endpoint()
    if not endpoint:
        print_warning(f"⚠️  {NO_ENDPOINT_MESSAGE}", out=out)
        return False

    client = client_factory(endpoint, config)
    out.print(f"🔗 Endpoint: {escape(client.base_url)}")
    try:
        client.test_connection()
    except ExternalLookupError as exc:
        out.print(f"[bold red]❌ Connection failed:[/bold red] {escape(str(exc))}")
        return False
    print_success("✅ Connection successful", out=out)
    return True
