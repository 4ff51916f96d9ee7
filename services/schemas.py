from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing import Any, Optional, Union

from services.errors import InvalidPayloadError


# Keys in the order they are checked for presence
REQUIRED_FIELDS = (
    'aadhaar',
    'nameAsPerAadhaar',
    'typeOfOrganisation',
    'pan',
    'mobile',
    'email',
    'socialCategory',
    'gender',
    'speciallyAbled',
    'nameOfEnterprise',
    'majorActivity',
)

YES_TOKENS = {'yes', 'y', 'true'}
NO_TOKENS = {'no', 'n', 'false'}


class RegistrationPayload(BaseModel):
    """Body of POST /api/registrations, keyed by the wire (camelCase) names."""

    model_config = ConfigDict(extra='ignore', str_strip_whitespace=True, populate_by_name=True)

    aadhaar: Optional[str] = None
    name_as_per_aadhaar: Optional[str] = Field(default=None, alias='nameAsPerAadhaar')
    type_of_organisation: Optional[str] = Field(default=None, alias='typeOfOrganisation')
    pan: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    social_category: Optional[str] = Field(default=None, alias='socialCategory')
    gender: Optional[str] = None
    specially_abled: Optional[Union[bool, str]] = Field(default=None, alias='speciallyAbled')
    name_of_enterprise: Optional[str] = Field(default=None, alias='nameOfEnterprise')
    major_activity: Optional[str] = Field(default=None, alias='majorActivity')

    @classmethod
    def from_request(cls, data: Any) -> "RegistrationPayload":
        if not isinstance(data, dict):
            raise InvalidPayloadError()
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidPayloadError() from e

    def get(self, key: str) -> Any:
        """Look a value up by its wire name."""
        return getattr(self, _ATTRIBUTE_BY_KEY[key])

    def is_missing(self, key: str) -> bool:
        value = self.get(key)
        return value is None or value == ''

    @property
    def specially_abled_flag(self) -> bool:
        if isinstance(self.specially_abled, bool):
            return self.specially_abled
        return str(self.specially_abled).lower() in YES_TOKENS

    def has_valid_specially_abled(self) -> bool:
        if isinstance(self.specially_abled, bool):
            return True
        return str(self.specially_abled).lower() in YES_TOKENS | NO_TOKENS


_ATTRIBUTE_BY_KEY = {
    field.alias or name: name
    for name, field in RegistrationPayload.model_fields.items()
}
