"""
core/requests.py
----------------

The closed set of gateway verbs.  Each member carries the path segment
appended after the shipper code and the API version serving it.
"""

from __future__ import annotations

from enum import Enum


class Request(str, Enum):
    """Gateway endpoint verbs."""

    ADD = "add"
    DROP = "drop"
    TRACK = "track"
    TRACK_STATUS = "trackstatus"
    OVERVIEW = "overview"
    LABELS = "labels"
    PACKAGE = "package"
    ORDER = "order"
    ORDER_VIEW = "orderview"
    ORDER_PICKUP = "orderpickup"
    SERVICES = "services"
    MANIPULATION_UNITS = "manipulationunits"
    BRANCHES = "branches"
    FULL_BRANCHES = "fullbranches"
    BRANCH_LOCATOR = "branchlocator"
    COUNTRIES = "countries4service"
    COD_COUNTRIES = "cod4services"
    ZIP_CODES = "zipcodes"
    CHECK = "check"
    ADR_UNITS = "adrunits"

    @property
    def segment(self) -> str:
        return self.value

    @property
    def version(self) -> str:
        return API_VERSIONS.get(self, "v1")


# Verbs served by the second API generation; everything else is v1.
API_VERSIONS = {
    Request.TRACK: "v2",
}
