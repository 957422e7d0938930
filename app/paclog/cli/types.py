"""Filter choices accepted on the command line."""

from enum import Enum

from paclog.models.entry import LogAction


class FilterChoice(str, Enum):
    """Log categories, each with a one-letter shorthand."""

    A = "a"
    ALL = "all"
    I = "i"  # noqa: E741
    INSTALLED = "installed"
    E = "e"
    EXPLICITLY = "explicitly"
    U = "u"
    UPGRADED = "upgraded"
    R = "r"
    REMOVED = "removed"
    UNINSTALLED = "uninstalled"

    @property
    def is_explicit(self) -> bool:
        """Whether this choice restricts output to explicitly installed packages."""
        return self in (FilterChoice.E, FilterChoice.EXPLICITLY)

    @property
    def action(self) -> LogAction | None:
        """Log action selected by this choice (None for 'all')."""
        return _ACTIONS.get(self)


_ACTIONS: dict[FilterChoice, LogAction] = {
    FilterChoice.I: LogAction.INSTALLED,
    FilterChoice.INSTALLED: LogAction.INSTALLED,
    FilterChoice.E: LogAction.INSTALLED,
    FilterChoice.EXPLICITLY: LogAction.INSTALLED,
    FilterChoice.U: LogAction.UPGRADED,
    FilterChoice.UPGRADED: LogAction.UPGRADED,
    FilterChoice.R: LogAction.REMOVED,
    FilterChoice.REMOVED: LogAction.REMOVED,
    FilterChoice.UNINSTALLED: LogAction.REMOVED,
}
