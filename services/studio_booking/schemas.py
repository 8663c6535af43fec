# Corps JSON de POST /book (clés camelCase côté client).
# Les champs sont volontairement peu typés : un numéro d'étudiant ou
# de téléphone peut arriver en nombre, la facture est opaque. La
# validation métier, dans l'ordre, est faite par
# booking_service.validate_request.
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: Any = None
    student_number: Any = Field(None, alias="studentNumber")
    company: Any = None
    name: Any = None
    phone: Any = None
    email: Any = None
    field: Any = None
    date: Any = None
    start_times: Any = Field(None, alias="startTimes")
    participants: Optional[int] = None
    reason: Any = None
    accepted_terms: Any = Field(None, alias="acceptedTerms")
    invoice: Any = None
