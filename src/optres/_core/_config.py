from dataclasses import dataclass
from typing import Final

from ._format import payload_repr


@dataclass(slots=True)
class Config:
    """Display settings shared by every container.

    Only affects `repr()` output, never behaviour.

    Example:
    ```python
    >>> import optres as ot
    >>> cfg = ot.get_config()
    >>> cfg.repr_max_length = 5
    >>> ot.Some("a long piece of text")
    Some(value='a lo...)
    >>> cfg.reset()
    >>> ot.Some("a long piece of text")
    Some(value='a long piece of text')

    ```
    """

    repr_width: int = 80
    """Line width handed to `pprint`."""
    repr_depth: int = 3
    """Nesting depth after which payloads render as `...`."""
    repr_max_length: int = 200
    """Renderings longer than this are cut and suffixed with `...`."""

    def value_repr(self, v: object) -> str:
        return payload_repr(
            v,
            max_length=self.repr_max_length,
            depth=self.repr_depth,
            width=self.repr_width,
        )

    def reset(self) -> None:
        """Restore the default settings in place."""
        defaults = Config()
        self.repr_width = defaults.repr_width
        self.repr_depth = defaults.repr_depth
        self.repr_max_length = defaults.repr_max_length


_CONFIG: Final = Config()


def get_config() -> Config:
    """Return the process-wide `Config` instance."""
    return _CONFIG
