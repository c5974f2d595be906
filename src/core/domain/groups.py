"""Browser-relevance table for W3C groups.

The table maps group names to a relevance flag and is loaded from
`data/groups.json` at startup:

- Working groups are relevant unless flagged `false`.
- Community groups are ignored unless flagged `true`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.models import Group

WORKING_GROUP = "working group"
COMMUNITY_GROUP = "community group"


class GroupPolicy(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    working_groups: dict[str, bool] = Field(
        default_factory=dict,
        alias="working-groups",
        description="Working group name -> produces browser specs.",
    )
    community_groups: dict[str, bool] = Field(
        default_factory=dict,
        alias="community-groups",
        description="Community group name -> watched for browser specs.",
    )

    def is_browser_wg(self, group: Group) -> bool:
        return group.type == WORKING_GROUP and self.working_groups.get(group.name, True)

    def is_watched_cg(self, group: Group) -> bool:
        return group.type == COMMUNITY_GROUP and self.community_groups.get(group.name, False)

    def classify(self, groups: list[Group]) -> tuple[list[Group], list[Group]]:
        """Split groups into (browser working groups, watched community groups)."""

        wgs = [g for g in groups if self.is_browser_wg(g)]
        cgs = [g for g in groups if self.is_watched_cg(g)]
        return wgs, cgs
