"""Shared pytest fixtures for dm8-schema tests."""

from collections import namedtuple

import pytest

from dm8_schema.database import DmSchemaManager, TypeRegistry
from tests.fixtures import FakeExecutor


@pytest.fixture
def users_column_rows():
    """ALL_TAB_COLUMNS rows for a USERS table, in COLUMN_ID order."""
    return [
        {
            "COLUMN_NAME": "ID", "DATA_TYPE": "NUMBER", "DATA_LENGTH": 22,
            "DATA_PRECISION": 10, "DATA_SCALE": 0, "NULLABLE": "N",
            "DATA_DEFAULT": None, "COLUMN_ID": 1,
        },
        {
            "COLUMN_NAME": "NAME", "DATA_TYPE": "VARCHAR2", "DATA_LENGTH": 100,
            "DATA_PRECISION": None, "DATA_SCALE": None, "NULLABLE": "Y",
            "DATA_DEFAULT": "'anonymous'", "COLUMN_ID": 2,
        },
        {
            "COLUMN_NAME": "CREATED_AT", "DATA_TYPE": "TIMESTAMP", "DATA_LENGTH": 8,
            "DATA_PRECISION": None, "DATA_SCALE": 6, "NULLABLE": "N",
            "DATA_DEFAULT": " SYSDATE ", "COLUMN_ID": 3,
        },
        {
            "COLUMN_NAME": "STATUS", "DATA_TYPE": "INT", "DATA_LENGTH": 4,
            "DATA_PRECISION": None, "DATA_SCALE": None, "NULLABLE": "Y",
            "DATA_DEFAULT": "0", "COLUMN_ID": 4,
        },
    ]


@pytest.fixture
def users_index_rows():
    """Index join rows for USERS: a primary key and a composite unique index."""
    return [
        {"INDEX_NAME": "PK_USERS", "TABLE_NAME": "USERS", "UNIQUENESS": "UNIQUE",
         "CONSTRAINT_TYPE": "P", "COLUMN_NAME": "ID"},
        {"INDEX_NAME": "IDX1", "TABLE_NAME": "USERS", "UNIQUENESS": "UNIQUE",
         "CONSTRAINT_TYPE": None, "COLUMN_NAME": "A"},
        {"INDEX_NAME": "IDX1", "TABLE_NAME": "USERS", "UNIQUENESS": "UNIQUE",
         "CONSTRAINT_TYPE": None, "COLUMN_NAME": "B"},
        {"INDEX_NAME": "IDX1", "TABLE_NAME": "USERS", "UNIQUENESS": "UNIQUE",
         "CONSTRAINT_TYPE": None, "COLUMN_NAME": "C"},
        {"INDEX_NAME": "IDX_NAME", "TABLE_NAME": "USERS", "UNIQUENESS": "NONUNIQUE",
         "CONSTRAINT_TYPE": None, "COLUMN_NAME": "NAME"},
    ]


@pytest.fixture
def fake_executor(users_column_rows, users_index_rows):
    """FakeExecutor answering for the USERS table in schema APP."""
    return FakeExecutor({
        "ALL_TAB_COLUMNS": users_column_rows,
        "DBA_INDEXES": users_index_rows,
        "DBA_OBJECTS": [{"OBJECT_NAME": "USERS"}, {"OBJECT_NAME": "ORDERS"}],
    })


@pytest.fixture
def manager(fake_executor):
    """DmSchemaManager bound to schema APP."""
    return DmSchemaManager(fake_executor, schema="app")


@pytest.fixture
def registry():
    """A fresh TypeRegistry with DM8 defaults."""
    return TypeRegistry()


@pytest.fixture
def lower_case_row():
    """Factory building attribute-style rows with lower-case field names."""
    def _make(**fields):
        row_type = namedtuple("Row", [name.lower() for name in fields])
        return row_type(*fields.values())
    return _make
