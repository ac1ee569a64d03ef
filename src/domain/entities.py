from pydantic import BaseModel, ConfigDict

# --- People ---

class Person(BaseModel):
    """A person record as served by the collection resource."""

    # The placeholder API returns username, email, address, ... as well.
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str

class NewPerson(BaseModel):
    """Create payload. The server assigns the id."""

    name: str

class CreatedPerson(BaseModel):
    """Create response. Echoes the payload; the id may be absent."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    name: str | None = None
