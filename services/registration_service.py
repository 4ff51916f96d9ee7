# services/registration_service.py

import random
from datetime import datetime
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from db.extensions import db
from models.udyamRegistration import UdyamRegistration
from services.errors import (
    DuplicateRegistrationError,
    InvalidFieldError,
    MissingFieldError,
    RegistrationNotFoundError,
    RegistrationNumberExhaustedError,
    StorageError,
)
from services.schemas import REQUIRED_FIELDS
from services.validators import (
    validate_aadhaar,
    validate_email,
    validate_enterprise_name,
    validate_mobile,
    validate_name,
    validate_pan,
)

REGISTRATION_PREFIX = 'UDYAM'

# Identity fields first, then business fields
FORMAT_CHECKS = (
    ('aadhaar', validate_aadhaar),
    ('nameAsPerAadhaar', validate_name),
    ('pan', validate_pan),
    ('mobile', validate_mobile),
    ('email', validate_email),
    ('nameOfEnterprise', validate_enterprise_name),
)

AADHAAR_TAKEN = 'This Aadhaar number is already registered'
PAN_TAKEN = 'This PAN is already registered'


class RegistrationService:

    @staticmethod
    def validate_payload(payload):
        """Raise on the first missing or malformed field, in a fixed order."""
        for field in REQUIRED_FIELDS:
            if payload.is_missing(field):
                raise MissingFieldError(field)

        for field, validator in FORMAT_CHECKS:
            if not validator(payload.get(field)):
                raise InvalidFieldError(field)

        if not payload.has_valid_specially_abled():
            raise InvalidFieldError('speciallyAbled')

    @staticmethod
    def generate_registration_number(now=None):
        year = (now or datetime.utcnow()).year
        return f"{REGISTRATION_PREFIX}-{year}-{random.randint(0, 999999):06d}"

    @staticmethod
    def allocate_registration_number(now=None, max_attempts=None):
        if max_attempts is None:
            max_attempts = current_app.config.get('REGISTRATION_NUMBER_MAX_ATTEMPTS', 10)

        for attempt in range(1, max_attempts + 1):
            candidate = RegistrationService.generate_registration_number(now)
            if not RegistrationService.find_by_registration_number(candidate):
                return candidate
            current_app.logger.warning(f"Registration number collision on attempt {attempt}: {candidate}")

        current_app.logger.error(f"Could not allocate a registration number after {max_attempts} attempts")
        raise RegistrationNumberExhaustedError()

    @staticmethod
    def ensure_not_registered(aadhaar, pan):
        if RegistrationService.find_by_aadhaar(aadhaar):
            raise DuplicateRegistrationError(AADHAAR_TAKEN, field='aadhaar')
        if RegistrationService.find_by_pan(pan):
            raise DuplicateRegistrationError(PAN_TAKEN, field='pan')

    @staticmethod
    def create_registration(payload):
        RegistrationService.validate_payload(payload)

        aadhaar = payload.aadhaar
        pan = payload.pan.upper()
        max_attempts = current_app.config.get('REGISTRATION_NUMBER_MAX_ATTEMPTS', 10)

        try:
            RegistrationService.ensure_not_registered(aadhaar, pan)

            for attempt in range(1, max_attempts + 1):
                now = datetime.utcnow()
                registration = UdyamRegistration(
                    aadhaar=aadhaar,
                    name_as_per_aadhaar=payload.name_as_per_aadhaar,
                    type_of_organisation=payload.type_of_organisation,
                    pan=pan,
                    mobile=payload.mobile,
                    email=payload.email,
                    social_category=payload.social_category,
                    gender=payload.gender,
                    specially_abled=payload.specially_abled_flag,
                    name_of_enterprise=payload.name_of_enterprise,
                    major_activity=payload.major_activity,
                    registration_number=RegistrationService.allocate_registration_number(now),
                    registration_date=now,
                )
                db.session.add(registration)
                try:
                    db.session.commit()
                    break
                except IntegrityError:
                    # Lost a race against a concurrent submission; the unique index decided
                    db.session.rollback()
                    conflict = RegistrationService._conflict_error(aadhaar, pan)
                    if conflict:
                        raise conflict
                    current_app.logger.warning(
                        f"Registration number {registration.registration_number} taken concurrently "
                        f"on attempt {attempt}"
                    )
            else:
                current_app.logger.error(f"Could not insert a registration after {max_attempts} attempts")
                raise RegistrationNumberExhaustedError()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error saving registration: {str(e)}", exc_info=True)
            raise StorageError('Failed to save registration')

        current_app.logger.info(
            f"Registration {registration.registration_number} created with ID: {registration.id}"
        )
        return registration

    @staticmethod
    def _conflict_error(aadhaar, pan):
        """Name the duplicate behind a unique violation, or None if only the registration number clashed."""
        if RegistrationService.find_by_aadhaar(aadhaar):
            return DuplicateRegistrationError(AADHAAR_TAKEN, field='aadhaar')
        if RegistrationService.find_by_pan(pan):
            return DuplicateRegistrationError(PAN_TAKEN, field='pan')
        return None

    @staticmethod
    def find_by_aadhaar(aadhaar):
        return UdyamRegistration.query.filter_by(aadhaar=aadhaar).first()

    @staticmethod
    def find_by_pan(pan):
        return UdyamRegistration.query.filter_by(pan=pan).first()

    @staticmethod
    def find_by_registration_number(registration_number):
        return UdyamRegistration.query.filter_by(registration_number=registration_number).first()

    @staticmethod
    def get_registration(registration_number=None, aadhaar=None):
        """Look up one registration by number, else by Aadhaar."""
        try:
            if registration_number:
                registration = RegistrationService.find_by_registration_number(registration_number)
            else:
                registration = RegistrationService.find_by_aadhaar(aadhaar)
        except SQLAlchemyError as e:
            current_app.logger.error(f"Error fetching registration: {str(e)}", exc_info=True)
            raise StorageError('Failed to fetch registration')

        if not registration:
            raise RegistrationNotFoundError()
        return registration

    @staticmethod
    def get_registration_by_id(registration_id):
        try:
            registration = db.session.get(UdyamRegistration, registration_id)
        except SQLAlchemyError as e:
            current_app.logger.error(f"Error fetching registration {registration_id}: {str(e)}", exc_info=True)
            raise StorageError('Failed to fetch registration')

        if not registration:
            raise RegistrationNotFoundError()
        return registration

    @staticmethod
    def list_recent_registrations(limit=None):
        if limit is None:
            limit = current_app.config.get('REGISTRATION_LIST_LIMIT', 100)
        try:
            return (
                UdyamRegistration.query
                .order_by(UdyamRegistration.created_at.desc(), UdyamRegistration.id.desc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            current_app.logger.error(f"Error listing registrations: {str(e)}", exc_info=True)
            raise StorageError('Failed to fetch registration')
