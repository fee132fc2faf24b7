"""Shared snapshots for the token engine tests."""

import pytest

from brandtokens.engine import synthesize


@pytest.fixture(scope="session")
def casewell():
    return synthesize(directive="legal case tracker", product_name="Casewell")


@pytest.fixture(scope="session")
def crm():
    return synthesize(directive="Build a CRM", product_name="Acme")
