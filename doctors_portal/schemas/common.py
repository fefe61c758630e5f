from pydantic import BaseModel, ConfigDict
from typing import Optional

# Store operation results, shaped like the document store acknowledgements
# the web client already consumes. Insert and rejection results forbid extra
# keys so a Union of the two resolves unambiguously.

class InsertResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    acknowledged: bool = True
    insertedId: Optional[str] = None

class UpdateResult(BaseModel):
    acknowledged: bool = True
    matchedCount: int = 0
    modifiedCount: int = 0
    upsertedId: Optional[str] = None
    upsertedCount: int = 0

class DeleteResult(BaseModel):
    acknowledged: bool = True
    deletedCount: int = 0

class Rejected(BaseModel):
    """Soft failure reported with a 200 status."""
    model_config = ConfigDict(extra="forbid")

    acknowledged: bool = False
    message: str
