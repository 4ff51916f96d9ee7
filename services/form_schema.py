# services/form_schema.py

import json
import logging
import os
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    'data',
    'udyam-form-schema.json'
)

STEPS = ('step1', 'step2')


@lru_cache(maxsize=None)
def load_form_schema(path=None):
    """Load the scraped form schema. Read once per path."""
    path = path or DEFAULT_SCHEMA_PATH
    with open(path, encoding='utf-8') as f:
        schema = json.load(f)

    for step in STEPS:
        if step not in schema or 'fields' not in schema[step]:
            raise ValueError(f"Form schema at {path} has no fields for {step}")

    logger.info(f"Loaded form schema from {path}")
    return schema


def get_step_fields(step, schema=None):
    schema = schema or load_form_schema()
    if step not in STEPS:
        raise KeyError(f"Unknown form step: {step}")
    return schema[step]['fields']


def get_field(step, field_id, schema=None):
    for field in get_step_fields(step, schema):
        if field['id'] == field_id:
            return field
    return None


def get_option_values(step, field_id, schema=None):
    field = get_field(step, field_id, schema)
    if not field or 'options' not in field:
        return None
    return [option['value'] for option in field['options']]
