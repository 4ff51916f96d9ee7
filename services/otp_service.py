# services/otp_service.py

import random
import string
import logging
from datetime import datetime
from flask import current_app
import redis

from db.extensions import redis_client
from services.validators import validate_aadhaar, validate_name, validate_otp

logger = logging.getLogger(__name__)


class OTPService:
    """
    Simulated Aadhaar OTP. There is no UIDAI integration: the OTP is kept
    in Redis and, in demo mode, returned to the caller instead of being
    sent to the Aadhaar-linked mobile.
    """

    @staticmethod
    def generate_otp(length=6):
        """Generate a random numeric OTP"""
        return ''.join(random.choices(string.digits, k=length))

    @staticmethod
    def _key(aadhaar):
        return f'aadhaar_otp:{aadhaar}'

    @staticmethod
    def send_otp(aadhaar, name_as_per_aadhaar):
        start_time = datetime.now()

        if not validate_aadhaar(aadhaar):
            return {'success': False, 'message': 'Invalid Aadhaar number format'}, 400
        if not validate_name(name_as_per_aadhaar):
            return {'success': False, 'message': 'Invalid name format'}, 400

        otp = OTPService.generate_otp()
        expiry = current_app.config.get('OTP_EXPIRY_SECONDS', 300)

        try:
            redis_client.setex(OTPService._key(aadhaar), expiry, otp)
        except redis.exceptions.RedisError as e:
            logger.error(f"Error storing OTP for Aadhaar ending {aadhaar[-4:]}: {str(e)}", exc_info=True)
            return {'success': False, 'message': 'Failed to send OTP. Please try again later.'}, 500

        elapsed = (datetime.now() - start_time).total_seconds() * 1000
        logger.info(f"OTP generated for Aadhaar ending {aadhaar[-4:]} in {elapsed:.2f}ms")

        result = {'success': True, 'message': 'OTP sent successfully'}
        if current_app.config.get('OTP_DEMO_MODE'):
            result['demoOTP'] = otp
        return result, 200

    @staticmethod
    def verify_otp(aadhaar, provided_otp):
        if not validate_otp(provided_otp):
            return {'success': False, 'message': 'Invalid OTP format'}, 400
        if not validate_aadhaar(aadhaar):
            return {'success': False, 'message': 'Invalid Aadhaar number format'}, 400

        redis_key = OTPService._key(aadhaar)
        try:
            stored_otp = redis_client.get(redis_key)

            if not stored_otp:
                logger.warning(f"OTP not found or expired for Aadhaar ending {aadhaar[-4:]}")
                return {'success': False, 'message': 'OTP expired or not found. Please request a new one.'}, 400

            # Handle bytes vs string (if decode_responses is False)
            if isinstance(stored_otp, bytes):
                stored_otp = stored_otp.decode('utf-8')

            if stored_otp != provided_otp:
                logger.warning(f"Invalid OTP for Aadhaar ending {aadhaar[-4:]}")
                return {'success': False, 'message': 'Invalid OTP'}, 400

            redis_client.delete(redis_key)
        except redis.exceptions.RedisError as e:
            logger.error(f"Error verifying OTP for Aadhaar ending {aadhaar[-4:]}: {str(e)}", exc_info=True)
            return {'success': False, 'message': 'Failed to verify OTP. Please try again.'}, 500

        logger.info(f"OTP verified for Aadhaar ending {aadhaar[-4:]}")
        return {'success': True, 'message': 'OTP verified successfully'}, 200
