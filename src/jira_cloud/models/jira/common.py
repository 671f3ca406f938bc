"""
Common Jira entity models shared by several resource groups.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import UNASSIGNED


class JiraUser(ApiModel):
    """
    Model representing a Jira user reference as embedded in other resources.
    """

    self_url: str | None = Field(default=None, alias="self")
    account_id: str | None = None
    account_type: str | None = None
    display_name: str | None = None
    email_address: str | None = None
    active: bool | None = None
    time_zone: str | None = None

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for display."""
        return {
            "account_id": self.account_id,
            "display_name": self.display_name or UNASSIGNED,
            "active": self.active,
        }
