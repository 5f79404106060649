from typing import Iterable

from scriptgen.utils.block import Line
from scriptgen.utils.options import GeneratorOptions

IMPORT_PUPPETEER = "const puppeteer = require('puppeteer');\n"

HEADER = (
    "const browser = await puppeteer.launch()\n"
    "const page = await browser.newPage()\n"
)

FOOTER = "await browser.close()"

WRAPPED_HEADER = (
    "(async () => {\n"
    "  const browser = await puppeteer.launch()\n"
    "  const page = await browser.newPage()\n"
)

WRAPPED_FOOTER = "  await browser.close()\n})()"

HEADFUL_LAUNCH = "launch({ headless: false })"


class ProgramRenderer:
    """Wraps generated statement lines in the Puppeteer program skeleton."""

    def __init__(self, options: GeneratorOptions):
        self.options = options

    @property
    def indent(self) -> str:
        return "  " if self.options.wrap_async else ""

    def get_header(self) -> str:
        header = WRAPPED_HEADER if self.options.wrap_async else HEADER
        if not self.options.headless:
            header = header.replace("launch()", HEADFUL_LAUNCH)
        return header

    def get_footer(self) -> str:
        return WRAPPED_FOOTER if self.options.wrap_async else FOOTER

    def render_body(self, lines: Iterable[Line]) -> str:
        return "".join(f"{self.indent}{line.value}\n" for line in lines)

    def render(self, lines: Iterable[Line]) -> str:
        return IMPORT_PUPPETEER + self.get_header() + self.render_body(lines) + self.get_footer()
