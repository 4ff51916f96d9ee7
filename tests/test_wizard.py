# tests/test_wizard.py

from urllib.parse import urlsplit

import pytest
import requests

from client.wizard import (
    NETWORK_ERROR,
    BusinessStep,
    IdentityStep,
    RegistrationWizard,
)
from models.udyamRegistration import UdyamRegistration


class TestClientSession:
    """Routes wizard requests into the Flask test client."""
    __test__ = False

    class Response:
        def __init__(self, response):
            self.status_code = response.status_code
            self._body = response.get_json()

        def json(self):
            return self._body

    def __init__(self, client):
        self.client = client
        self.requests = []

    def post(self, url, json=None, timeout=None):
        self.requests.append(json)
        return self.Response(self.client.post(urlsplit(url).path, json=json))


class OfflineSession:
    def post(self, url, json=None, timeout=None):
        raise requests.ConnectionError('Connection refused')


def fill_wizard(wizard, payload):
    wizard.identity.set_value('aadhaar', payload['aadhaar'])
    wizard.identity.set_value('nameAsPerAadhaar', payload['nameAsPerAadhaar'])
    wizard.identity.set_value('disclaimer', True)
    assert wizard.complete_identity()
    for field_id in BusinessStep.field_ids:
        wizard.business.set_value(field_id, payload[field_id])


def test_identity_step_requires_declaration():
    step = IdentityStep(initial_data={'aadhaar': '123456789012', 'nameAsPerAadhaar': 'Ravi Kumar'})

    errors = step.validate()

    assert errors == {'disclaimer': 'You must accept the declaration'}


def test_identity_step_reports_field_errors():
    step = IdentityStep()
    step.set_value('aadhaar', '1234-5678')
    step.set_value('disclaimer', True)

    errors = step.validate()

    assert step.data['aadhaar'] == '12345678'
    assert errors['aadhaar'] == 'Aadhaar number must be exactly 12 digits'
    assert errors['nameAsPerAadhaar'] == 'Name is required'


def test_typing_clears_field_error():
    step = IdentityStep()
    step.validate()
    assert 'aadhaar' in step.errors

    step.set_value('aadhaar', '1')

    assert 'aadhaar' not in step.errors


def test_business_step_uses_schema_rules(payload):
    step = BusinessStep(initial_data=dict(payload, gender='', socialCategory='Unknown'))

    errors = step.validate()

    assert errors == {
        'gender': 'Gender is required',
        'socialCategory': 'Please select a valid Social Category',
    }


def test_business_step_uppercases_pan():
    step = BusinessStep()
    step.set_value('pan', 'abcde1234f')
    assert step.data['pan'] == 'ABCDE1234F'


def test_wizard_does_not_advance_with_invalid_identity():
    wizard = RegistrationWizard(session=OfflineSession())
    wizard.identity.set_value('aadhaar', '123')

    assert not wizard.complete_identity()
    assert wizard.current_step == 1


def test_wizard_submits_and_confirms(client, payload):
    session = TestClientSession(client)
    wizard = RegistrationWizard(session=session)
    fill_wizard(wizard, payload)

    confirmation = wizard.submit()

    assert confirmation is not None
    assert confirmation.registration_number.startswith('UDYAM-')
    assert confirmation.name_of_enterprise == payload['nameOfEnterprise']
    assert wizard.current_step == 3
    assert session.requests[0]['aadhaar'] == payload['aadhaar']
    assert 'disclaimer' not in session.requests[0]
    assert UdyamRegistration.query.count() == 1


def test_wizard_blocks_invalid_business_step(client, payload):
    session = TestClientSession(client)
    wizard = RegistrationWizard(session=session)
    fill_wizard(wizard, dict(payload, mobile='5876543210'))

    assert wizard.submit() is None
    assert wizard.business.errors['mobile'] == 'Mobile number must be 10 digits starting with 6-9'
    assert session.requests == []


def test_wizard_surfaces_server_error(client, payload):
    client.post('/api/registrations', json=payload)
    wizard = RegistrationWizard(session=TestClientSession(client))
    fill_wizard(wizard, dict(payload, pan='PQRST6789Z'))

    assert wizard.submit() is None
    assert wizard.submit_error == 'This Aadhaar number is already registered'
    assert wizard.current_step == 2


def test_wizard_network_error(payload):
    wizard = RegistrationWizard(session=OfflineSession())
    fill_wizard(wizard, payload)

    assert wizard.submit() is None
    assert wizard.submit_error == NETWORK_ERROR


def test_submit_requires_identity_step():
    wizard = RegistrationWizard(session=OfflineSession())
    with pytest.raises(RuntimeError):
        wizard.submit()


def test_back_and_reset(payload):
    wizard = RegistrationWizard(session=OfflineSession())
    fill_wizard(wizard, payload)

    wizard.back()
    wizard.reset()

    assert wizard.current_step == 1
    assert wizard.identity.data['aadhaar'] == payload['aadhaar']
    assert all(value == '' for value in wizard.business.data.values())
