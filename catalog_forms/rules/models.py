from pydantic import BaseModel, Field


class FieldRules(BaseModel):
    required: bool = True
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None

class DateFieldRules(BaseModel):
    required: bool = True
    min_today: bool = False

class ProductFieldRules(BaseModel):
    id: FieldRules = Field(default_factory=lambda: FieldRules(min_length=3, max_length=10))
    name: FieldRules = Field(default_factory=lambda: FieldRules(min_length=5, max_length=100))
    description: FieldRules = Field(
        default_factory=lambda: FieldRules(min_length=10, max_length=200)
    )
    logo: FieldRules = Field(default_factory=lambda: FieldRules(pattern=r"^https?://.+"))
    date_release: DateFieldRules = Field(default_factory=DateFieldRules)

class TimingRules(BaseModel):
    # Grace period before leaving the form after a failed load
    load_error_redirect_ms: int = Field(default=2000, ge=0)
    # Upper bound for one uniqueness round trip
    id_check_timeout_ms: int = Field(default=5000, gt=0)

class RoutesRules(BaseModel):
    listing: str = "/products"

class FormRules(BaseModel):
    fields: ProductFieldRules = Field(default_factory=ProductFieldRules)
    timing: TimingRules = Field(default_factory=TimingRules)
    routes: RoutesRules = Field(default_factory=RoutesRules)
