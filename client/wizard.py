# client/wizard.py

import logging
from dataclasses import dataclass

import requests

from services.form_schema import get_field, get_option_values, load_form_schema
from services.validators import FIELD_RULES, get_validation_error

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'http://localhost:5000'
REGISTRATION_PATH = '/api/udyam-registration'

SUBMIT_FAILED = 'Failed to save registration. Please try again.'
NETWORK_ERROR = 'Network error. Please check your connection and try again.'


@dataclass
class RegistrationConfirmation:
    registration_number: str
    registration_date: str
    registration_id: int
    name_of_enterprise: str


class FormStep:
    """Local field state for one wizard step, validated against the form schema."""

    step = None
    field_ids = ()

    def __init__(self, schema=None, initial_data=None):
        self.schema = schema or load_form_schema()
        self.data = {field_id: '' for field_id in self.field_ids}
        self.errors = {}
        for field_id, value in (initial_data or {}).items():
            if field_id in self.data:
                self.set_value(field_id, value)

    def set_value(self, field_id, value):
        if field_id not in self.data:
            raise KeyError(f"{field_id} is not a field of {self.step}")
        self.data[field_id] = value
        # Clear error when user starts typing
        self.errors.pop(field_id, None)

    def validate_field(self, field_id, value):
        field = get_field(self.step, field_id, self.schema)
        if field_id in FIELD_RULES:
            return get_validation_error(field_id, value)
        if field is None:
            return None
        if field.get('required') and not value:
            return f"{field['name']} is required"
        options = get_option_values(self.step, field_id, self.schema)
        if options and value and value not in options:
            return f"Please select a valid {field['name']}"
        return None

    def validate(self):
        errors = {}
        for field_id in self.field_ids:
            error = self.validate_field(field_id, self.data[field_id])
            if error:
                errors[field_id] = error
        self.errors = errors
        return errors

    def is_valid(self):
        return not self.validate()


class IdentityStep(FormStep):
    step = 'step1'
    field_ids = ('aadhaar', 'nameAsPerAadhaar', 'disclaimer')

    def __init__(self, schema=None, initial_data=None):
        super().__init__(schema, initial_data)
        if not isinstance(self.data['disclaimer'], bool):
            self.data['disclaimer'] = False

    def set_value(self, field_id, value):
        if field_id == 'aadhaar' and isinstance(value, str):
            value = ''.join(ch for ch in value if ch.isdigit())
        super().set_value(field_id, value)

    def validate_field(self, field_id, value):
        if field_id == 'disclaimer':
            return None if value is True else 'You must accept the declaration'
        return super().validate_field(field_id, value)


class BusinessStep(FormStep):
    step = 'step2'
    field_ids = (
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

    def set_value(self, field_id, value):
        if field_id == 'pan' and isinstance(value, str):
            value = value.upper()
        super().set_value(field_id, value)

    def reset(self):
        self.data = {field_id: '' for field_id in self.field_ids}
        self.errors = {}


class RegistrationWizard:
    """
    Two-step registration wizard. Step 1 collects Aadhaar details, step 2
    the business details; submitting step 2 posts the merged record to the
    registration endpoint.

    ``session`` only needs a requests-style ``post(url, json=..., timeout=...)``.
    """

    def __init__(self, base_url=DEFAULT_BASE_URL, session=None, schema=None, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout
        schema = schema or load_form_schema()
        self.identity = IdentityStep(schema)
        self.business = BusinessStep(schema)
        self.current_step = 1
        self.confirmation = None
        self.submit_error = None

    def complete_identity(self):
        if not self.identity.is_valid():
            return False
        self.current_step = 2
        return True

    def back(self):
        self.current_step = 1

    def reset(self):
        self.business.reset()
        self.submit_error = None

    def registration_data(self):
        data = {'aadhaar': self.identity.data['aadhaar'],
                'nameAsPerAadhaar': self.identity.data['nameAsPerAadhaar']}
        data.update(self.business.data)
        return data

    def submit(self):
        """Return the confirmation on success, otherwise None with ``submit_error`` set."""
        if self.current_step != 2:
            raise RuntimeError("Complete the Aadhaar step before submitting")

        self.submit_error = None
        if not self.business.is_valid():
            return None

        try:
            response = self.session.post(
                self.base_url + REGISTRATION_PATH,
                json=self.registration_data(),
                timeout=self.timeout
            )
            result = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error submitting registration: {str(e)}")
            self.submit_error = NETWORK_ERROR
            return None

        if response.status_code == 200 and result.get('success'):
            data = result['data']
            self.confirmation = RegistrationConfirmation(
                registration_number=data['registrationNumber'],
                registration_date=data['registrationDate'],
                registration_id=data['id'],
                name_of_enterprise=self.business.data['nameOfEnterprise'],
            )
            self.current_step = 3
            return self.confirmation

        self.submit_error = result.get('error') or SUBMIT_FAILED
        return None
