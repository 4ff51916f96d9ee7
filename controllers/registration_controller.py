# controllers/registration_controller.py

from flask import Blueprint, request, jsonify, current_app
from services.errors import RegistrationError
from services.form_schema import load_form_schema
from services.registration_service import RegistrationService
from services.schemas import RegistrationPayload

registration_bp = Blueprint('registration', __name__)


@registration_bp.errorhandler(RegistrationError)
def handle_registration_error(e):
    if e.status_code >= 500:
        current_app.logger.error(f"Registration request failed: {e.message}")
    else:
        current_app.logger.warning(f"Rejected registration request: {e.message}")
    return jsonify(e.to_dict()), e.status_code


@registration_bp.route('/registrations', methods=['POST'])
@registration_bp.route('/udyam-registration', methods=['POST'])
def create_registration():
    current_app.logger.debug("Received registration request")

    payload = RegistrationPayload.from_request(request.get_json(silent=True))
    registration = RegistrationService.create_registration(payload)

    return jsonify({
        'success': True,
        'message': 'Registration submitted successfully',
        'data': {
            'registrationNumber': registration.registration_number,
            'registrationDate': registration.registration_date.isoformat(),
            'id': registration.id
        }
    }), 200


@registration_bp.route('/registrations', methods=['GET'])
@registration_bp.route('/udyam-registration', methods=['GET'])
def get_registrations():
    registration_number = request.args.get('registrationNumber')
    aadhaar = request.args.get('nationalId') or request.args.get('aadhaar')

    if registration_number or aadhaar:
        registration = RegistrationService.get_registration(
            registration_number=registration_number,
            aadhaar=aadhaar
        )
        return jsonify({'success': True, 'data': registration.to_dict()}), 200

    registrations = RegistrationService.list_recent_registrations()
    return jsonify({'success': True, 'data': [r.to_dict() for r in registrations]}), 200


@registration_bp.route('/registrations/<int:registration_id>', methods=['GET'])
def get_registration(registration_id):
    registration = RegistrationService.get_registration_by_id(registration_id)
    return jsonify({'success': True, 'data': registration.to_dict()}), 200


@registration_bp.route('/form-schema', methods=['GET'])
def get_form_schema():
    """Static description of the two wizard steps for the presentation layer"""
    return jsonify(load_form_schema(current_app.config['FORM_SCHEMA_PATH'])), 200
