# app/config.py

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Flask Secret Key
    SECRET_KEY = os.getenv('SECRET_KEY', 'your_secret_key')

    # Database Configuration
    SQLALCHEMY_DATABASE_URI = os.getenv(
        'DATABASE_URI',
        'postgresql://postgres:postgres@db:5432/udyam_db'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Database connection pool configuration
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,       # Validate connections before using
        "pool_recycle": 1800,        # Recycle every 30 minutes
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 30,          # Wait 30s for available connection
        "connect_args": {
            "connect_timeout": 10,   # PostgreSQL connection timeout
            "options": "-c statement_timeout=30000"  # 30s query timeout
        }
    }

    # Redis Configuration (Aadhaar OTP cache)
    REDIS_URL = os.getenv('REDIS_URL')
    REDIS_TLS_ENABLED = os.getenv('REDIS_TLS_ENABLED', 'false').lower() == 'true'

    # OTP simulation
    OTP_EXPIRY_SECONDS = int(os.getenv('OTP_EXPIRY_SECONDS', 300))  # 5 minutes
    # No SMS gateway exists, so the generated OTP is echoed back in demo mode
    OTP_DEMO_MODE = os.getenv('OTP_DEMO_MODE', 'true').lower() in ("true", "1", "t")

    # Registration
    REGISTRATION_NUMBER_MAX_ATTEMPTS = int(os.getenv('REGISTRATION_NUMBER_MAX_ATTEMPTS', 10))
    REGISTRATION_LIST_LIMIT = int(os.getenv('REGISTRATION_LIST_LIMIT', 100))

    # Form schema artifact produced by the scraper
    FORM_SCHEMA_PATH = os.getenv(
        'FORM_SCHEMA_PATH',
        os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'data', 'udyam-form-schema.json')
    )

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv('CORS_ORIGINS', 'http://localhost:3000,http://localhost:3001').split(',')
        if origin.strip()
    ]


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    OTP_DEMO_MODE = True
