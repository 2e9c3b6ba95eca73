"""Generator configuration."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

OUTPUT_FORMATS = ("ts", "js", "groq")

FILE_EXTENSIONS = {
    "ts": ".ts",
    "js": ".js",
    "groq": ".groq",
}


class GeneratorConfig(BaseModel):
    """Settings shared by the formatter, the hooks and the CLI.

    Unknown output formats are accepted and rendered as bare GROQ.
    """

    model_config = ConfigDict(frozen=True)

    output_format: str = "js"
    helper_name: str = "defineQuery"
    helper_module: str = "sanity"
    template_dir: Optional[str] = None
    header: Optional[str] = None

    @property
    def file_extension(self) -> str:
        return FILE_EXTENSIONS.get(self.output_format, ".groq")
