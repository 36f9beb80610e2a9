from datetime import date

from pydantic import BaseModel

# --- Product ---

class Product(BaseModel):
    """
    Financial product record as held by the record store.

    Dates travel as `YYYY-MM-DD` strings but stores may hand back
    `date` values; the form normalizes both when populating.
    """

    id: str
    name: str
    description: str
    logo: str
    date_release: date | str
    date_revision: date | str

    def payload(self) -> dict[str, str]:
        """JSON-ready representation with ISO date strings."""
        data = self.model_dump()
        for key in ("date_release", "date_revision"):
            value = data[key]
            if isinstance(value, date):
                data[key] = value.isoformat()
        return data
