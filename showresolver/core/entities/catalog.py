"""
Catalog entities.

Entities representing the shows and episodes tracked in the local catalog.
The resolution core only reads them.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass
class CatalogShow:
    """
    TV show tracked in the local catalog.

    Attributes:
        id: Internal database ID
        name: Canonical show name
        release: Scene name when it differs from the canonical name
        grabber: Remote guide the show was imported from (ex: "tvdb")
        external_id: ID of the show in that guide
        timezone: IANA timezone of the original broadcaster
    """

    id: Optional[int] = None
    name: str = ""
    release: Optional[str] = None
    grabber: Optional[str] = None
    external_id: Optional[str] = None
    timezone: Optional[str] = None


@dataclass
class CatalogEpisode:
    """
    Episode of a show in the local catalog.

    Attributes:
        id: Internal database ID
        show_id: Reference to parent CatalogShow
        season: Season number
        number: Episode number within season
        title: Episode title
        air_date: Air date and time, stored in UTC
    """

    id: Optional[int] = None
    show_id: Optional[int] = None
    season: int = 0
    number: int = 0
    title: str = ""
    air_date: Optional[datetime] = None

    def original_air_date(self, tz_name: Optional[str] = None) -> Optional[date]:
        """
        Calendar date of the broadcast in the broadcaster's timezone.

        File names of daily shows carry the local air date, while the catalog
        stores UTC; a late evening US broadcast is already the next day in UTC.
        """
        if self.air_date is None:
            return None
        if not tz_name:
            return self.air_date.date()
        try:
            zone = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            return self.air_date.date()
        aired = self.air_date
        if aired.tzinfo is None:
            aired = aired.replace(tzinfo=timezone.utc)
        return aired.astimezone(zone).date()
