from dataclasses import dataclass

from ..errors import ConfigurationError


def _check_flag(name: str, value: object) -> None:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a boolean, got {value!r}.")


@dataclass(frozen=True)
class RenderConfig:
    preserve_whitespace: bool = False

    def __post_init__(self) -> None:
        _check_flag("preserve_whitespace", self.preserve_whitespace)


@dataclass(frozen=True)
class HtmlRenderConfig(RenderConfig):
    indent: bool = False
    indent_size: int = 2

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_flag("indent", self.indent)
        if isinstance(self.indent_size, bool) or not isinstance(self.indent_size, int):
            raise ConfigurationError(f"indent_size must be an integer, got {self.indent_size!r}.")
        if self.indent_size <= 0:
            raise ConfigurationError(f"indent_size must be positive, got {self.indent_size}.")
