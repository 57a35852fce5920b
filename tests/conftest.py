"""
Pytest Configuration and Fixtures
=================================

Provides shared fixtures for the test suite:
- Small hand-built catalogs and the seed catalog
- Household profiles
- Flask test client on an in-memory SQLite database
"""

import os

# Must be set before app.py is imported so the testing config is picked up
os.environ['FLASK_ENV'] = 'testing'

import pytest

from constants import SEED_CATALOG
from models.planning import Catalog, CartLine, DeliveryPlan, HouseholdProfile, Product
from services.catalog import build_catalog


def make_product(product_id, price=20.0, weight=2000, category='Beef', consumption_type='staple',
                 texture='steak', **extra):
    """Build a catalog product with sensible defaults."""
    name = extra.pop('name', product_id)
    return Product(
        id=product_id,
        sku=product_id.upper(),
        name=name,
        price=price,
        category=category,
        consumption_type=consumption_type,
        texture=texture,
        package_weight_grams=weight,
        **extra,
    )


def make_plan(*entries):
    """make_plan((product, {1: 2, 2: 1}), ...) -> DeliveryPlan"""
    lines = []
    for product, quantities in entries:
        full = {1: 0, 2: 0, 3: 0, 4: 0}
        full.update(quantities)
        lines.append(CartLine(product=product, quantities=full))
    return DeliveryPlan(lines=lines)


# =============================================================================
# Catalog fixtures
# =============================================================================

@pytest.fixture
def product_x():
    """20$ box of 2 kg."""
    return make_product('x', price=20.0, weight=2000)


@pytest.fixture
def small_catalog(product_x):
    return Catalog([
        product_x,
        make_product('ground', price=20.0, weight=4000, texture='ground'),
        make_product('chicken', price=30.0, weight=3000, category='Poultry', texture='piece'),
        make_product('steak_premium', price=100.0, weight=2000, is_premium=True),
        make_product('gone', price=10.0, weight=1000, is_available=False),
    ])


@pytest.fixture
def seed_catalog():
    return build_catalog(SEED_CATALOG)


# =============================================================================
# Household fixtures
# =============================================================================

@pytest.fixture
def couple_profile():
    """Two adults, 150 g each, one weekly beef meal of product x."""
    return HouseholdProfile(
        adults=2,
        teens=0,
        children=0,
        grams_per_person=150,
        restaurant_frequency=0,
        slot_frequencies={'Custom|boeuf_slot_1': 1.0},
        slot_selections={'boeuf_slot_1': 'x'},
    )


# =============================================================================
# Flask fixtures
# =============================================================================

@pytest.fixture
def client():
    """Test client with fresh tables and the seed catalog loaded."""
    from app import app, seed_catalog
    from models import db

    app.config['TESTING'] = True
    with app.app_context():
        db.drop_all()
        db.create_all()
        seed_catalog()
        with app.test_client() as test_client:
            yield test_client
        db.session.remove()
        db.drop_all()
