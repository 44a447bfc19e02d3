"""
Partner-request document.

    {
        "partnerId":       <partner _id>,
        "partnerEmail":    "<partner email or null>",
        "requesterEmail":  "<who asked>",
        "partnerSnapshot": {...},   # see models.partner.build_snapshot
        "createdAt":       <UTC datetime>
    }

`partnerId` is not enforced: deleting a partner leaves its requests in place.
"""

from typing import Any, Dict

from studymate.models.document import utc_now
from studymate.models.partner import build_snapshot


def build_request_document(partner: Dict[str, Any], requester_email: str) -> Dict[str, Any]:
    return {
        "partnerId": partner["_id"],
        "partnerEmail": partner.get("email"),
        "requesterEmail": requester_email,
        "partnerSnapshot": build_snapshot(partner),
        "createdAt": utc_now(),
    }
