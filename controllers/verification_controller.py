# controllers/verification_controller.py

from flask import Blueprint, request, jsonify, current_app
from services.otp_service import OTPService

verification_bp = Blueprint('verification', __name__)


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@verification_bp.route('/validate-aadhaar', methods=['POST'])
def validate_aadhaar():
    """Validate Aadhaar details and generate the OTP"""
    data = _json_body()
    current_app.logger.debug("Received Aadhaar validation request")

    result, status = OTPService.send_otp(
        data.get('aadhaar'),
        data.get('nameAsPerAadhaar')
    )
    return jsonify(result), status


@verification_bp.route('/verify-otp', methods=['POST'])
def verify_otp():
    data = _json_body()
    result, status = OTPService.verify_otp(data.get('aadhaar'), data.get('otp'))
    return jsonify(result), status
