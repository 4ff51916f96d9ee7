from sqlalchemy import Column, Integer, String, Boolean, DateTime
from db.extensions import db
from datetime import datetime


# models/udyamRegistration.py
class UdyamRegistration(db.Model):
    __tablename__ = 'udyam_registrations'

    id = Column(Integer, primary_key=True)

    # Step 1: Aadhaar verification
    aadhaar = Column(String(12), unique=True, nullable=False)
    name_as_per_aadhaar = Column(String(255), nullable=False)

    # Step 2: PAN verification and business details
    type_of_organisation = Column(String(50), nullable=False)
    pan = Column(String(10), unique=True, nullable=False)
    mobile = Column(String(10), nullable=False)
    email = Column(String(255), nullable=False)
    social_category = Column(String(20), nullable=False)
    gender = Column(String(10), nullable=False)
    specially_abled = Column(Boolean, nullable=False, default=False)
    name_of_enterprise = Column(String(100), nullable=False)
    major_activity = Column(String(50), nullable=False)

    # Assigned once on creation, never updated
    registration_number = Column(String(30), unique=True, nullable=False)
    registration_date = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "aadhaar": self.aadhaar,
            "nameAsPerAadhaar": self.name_as_per_aadhaar,
            "typeOfOrganisation": self.type_of_organisation,
            "pan": self.pan,
            "mobile": self.mobile,
            "email": self.email,
            "socialCategory": self.social_category,
            "gender": self.gender,
            "speciallyAbled": self.specially_abled,
            "nameOfEnterprise": self.name_of_enterprise,
            "majorActivity": self.major_activity,
            "registrationNumber": self.registration_number,
            "registrationDate": self.registration_date.isoformat() if self.registration_date else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<UdyamRegistration(id={self.id}, registration_number='{self.registration_number}')>"
