"""BaseService — shared foundation for tzstamp services.

Every service receives a :class:`CalendarHost` at construction time so
tests (and embedding applications) can substitute the clock and zone
rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tzstamp.domain.host import CalendarHost


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ConvertService(BaseService):
            def now(self) -> ServiceResult:
                millis = self._host.now_millis()
                ...
    """

    def __init__(self, host: CalendarHost | None = None) -> None:
        if host is None:
            from tzstamp.timestamps import default_host

            host = default_host()
        self._host = host

    @property
    def host(self) -> CalendarHost:
        return self._host
