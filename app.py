from flask import Flask, jsonify, request
from flask_migrate import Migrate
import hashlib
import json
import os

from config import get_config
from constants import CONSUMPTION_PROFILES, CUSTODY_PRESENCE, PERSONA_TEMPLATES, SEED_CATALOG, SOURCE_MANUAL
from models import (
    db, CatalogProduct, CartItem, PickupItem, CalendarEntry, Settings,
    Catalog, DeliveryPlan, FreezerCapacity, HouseholdProfile,
)
from services import (
    add_to_plan, apply_consumption_profile, apply_persona, auto_scale_to_budget,
    build_purchase_plan, calculate_demand, clean_product_record, deliveries_below_minimum,
    delivery_totals, generate_calendar, has_existing_customizations, next_plan_start,
    plan_total, plan_volume, remove_from_plan, required_space_for_family, simulate_freezer,
    substitute_premium_items, swap_calendar_days, update_quantity,
)
from utils.errors import PlanningInputError
from utils.logging_utils import get_logger

logger = get_logger(__name__)

app = Flask(__name__)
app.config.from_object(get_config())

db.init_app(app)
migrate = Migrate(app, db)

HOUSEHOLD_KEY = 'household'
FREEZER_KEY = 'freezer'
CALENDAR_FINGERPRINT_KEY = 'calendar_fingerprint'

# Household fields editable through PUT /api/household
NUMERIC_HOUSEHOLD_FIELDS = ('adults', 'teens', 'children', 'grams_per_person', 'restaurant_frequency', 'weekly_budget')


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    try:
        result = float(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def request_json():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ============================================
# STATE LOADING / SAVING
# ============================================

def load_catalog():
    return Catalog(row.to_product() for row in CatalogProduct.query.order_by(CatalogProduct.sku).all())


def load_profile():
    record = Settings.get_json(HOUSEHOLD_KEY)
    if record is None:
        return HouseholdProfile(weekly_budget=app.config['PLANNER_WEEKLY_BUDGET'])
    return HouseholdProfile.from_dict(record)


def save_profile(profile):
    Settings.set_json(HOUSEHOLD_KEY, profile.to_dict())


def load_freezer():
    return FreezerCapacity.from_dict(Settings.get_json(FREEZER_KEY))


def load_plan(catalog):
    records = [item.to_record() for item in CartItem.query.order_by(CartItem.id).all()]
    return DeliveryPlan.from_records(records, catalog)


def save_plan(plan):
    CartItem.query.delete()
    for line in plan.lines:
        db.session.add(CartItem.from_line(line))


def save_pickup(simulation):
    PickupItem.query.delete()
    for product_id, units in simulation.offload.items():
        for delivery_index, count in units.items():
            for _ in range(count):
                db.session.add(PickupItem(product_id=product_id, delivery_index=delivery_index))


def load_calendar(catalog):
    return [entry.to_day(catalog) for entry in CalendarEntry.query.order_by(CalendarEntry.day_index).all()]


def save_calendar(calendar):
    CalendarEntry.query.delete()
    for index, day in enumerate(calendar):
        db.session.add(CalendarEntry.from_day(index, day))


def portion_factors(profile):
    """Teen and child portion weights, with shared-custody presence applied."""
    teen = app.config['PLANNER_TEEN_FACTOR'] * CUSTODY_PRESENCE.get(profile.teens_frequency, 1.0)
    child = app.config['PLANNER_CHILD_FACTOR'] * CUSTODY_PRESENCE.get(profile.children_frequency, 1.0)
    return teen, child


def calendar_fingerprint(plan, profile):
    """Hash of everything the calendar is generated from."""
    household = profile.to_dict()
    data = {
        'cart': plan.to_records(),
        'household': {key: household[key] for key in (
            'adults', 'teens', 'children', 'grams_per_person', 'meals_per_week',
            'protein_days', 'teens_frequency', 'children_frequency')},
    }
    return hashlib.sha256(json.dumps(data, sort_keys=True).encode('utf-8')).hexdigest()


def cart_payload(plan):
    minimum = app.config['PLANNER_MIN_DELIVERY_AMOUNT']
    return {
        'cart': plan.to_records(),
        'total_cost': round(plan_total(plan), 2),
        'delivery_totals': {str(k): round(v, 2) for k, v in delivery_totals(plan).items()},
        'deliveries_below_minimum': deliveries_below_minimum(plan, minimum),
        'volume_cu_ft': round(plan_volume(plan), 4),
    }


# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(PlanningInputError)
def handle_planning_error(error):
    logger.warning("Rejected request %s %s: %s", request.method, request.path, error)
    return jsonify({'error': str(error)}), 400


# ============================================
# ROUTES - HOME / CATALOG
# ============================================

@app.route('/')
def index():
    return jsonify({
        'name': 'consumption-planner',
        'products': CatalogProduct.query.count(),
        'cart_lines': CartItem.query.count(),
        'calendar_days': CalendarEntry.query.count(),
    })


@app.route('/api/products')
def products_list():
    category = request.args.get('category')
    query = CatalogProduct.query
    if category:
        query = query.filter_by(category=category)
    return jsonify([row.to_product().to_dict() for row in query.order_by(CatalogProduct.sku).all()])


@app.route('/api/products/import', methods=['POST'])
def products_import():
    data = request.get_json(silent=True)
    records = data.get('products') if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise PlanningInputError("Expected a list of product records")

    created = updated = 0
    for record in records:
        cleaned = clean_product_record(record)
        row = db.session.get(CatalogProduct, cleaned['id'])
        if row is None:
            row = CatalogProduct(id=cleaned['id'])
            db.session.add(row)
            created += 1
        else:
            updated += 1
        row.update_from_record(cleaned)

    db.session.commit()
    logger.info("Catalog import: %d created, %d updated", created, updated)
    return jsonify({'created': created, 'updated': updated})


# ============================================
# ROUTES - HOUSEHOLD / FREEZER
# ============================================

@app.route('/api/household', methods=['GET', 'PUT'])
def household():
    profile = load_profile()
    if request.method == 'PUT':
        data = request_json()
        record = profile.to_dict()
        for key in NUMERIC_HOUSEHOLD_FIELDS:
            if key in data:
                record[key] = safe_float(data[key], default=0.0, min_val=0)
        if 'meals_per_week' in data:
            record['meals_per_week'] = safe_int(data['meals_per_week'], default=0, min_val=0, max_val=7)
        for key in ('teens_frequency', 'children_frequency'):
            if data.get(key) in CUSTODY_PRESENCE:
                record[key] = data[key]
        if 'protein_days' in data:
            days = data['protein_days']
            if not isinstance(days, list) or len(days) != 7:
                raise PlanningInputError("protein_days must be a list of 7 flags, Monday to Sunday")
            record['protein_days'] = days
        for key in ('slot_frequencies', 'slot_selections'):
            if key in data and not isinstance(data[key] or {}, dict):
                raise PlanningInputError(f"{key} must be an object")
        if 'slot_selections' in data:
            record['slot_selections'] = data['slot_selections'] or {}
        if 'slot_frequencies' in data:
            record['slot_frequencies'] = {k: safe_float(v, default=0.0, min_val=0)
                                          for k, v in (data['slot_frequencies'] or {}).items()}
        profile = HouseholdProfile.from_dict(record)
        save_profile(profile)
        db.session.commit()

    payload = profile.to_dict()
    payload['required_freezer_space'] = round(required_space_for_family(profile, *portion_factors(profile)), 2)
    return jsonify(payload)


@app.route('/api/household/customizations')
def household_customizations():
    return jsonify({'has_existing_customizations': has_existing_customizations(load_profile())})


@app.route('/api/freezer', methods=['GET', 'PUT'])
def freezer():
    capacity = load_freezer()
    if request.method == 'PUT':
        data = request_json()
        record = capacity.to_dict()
        for key in record:
            if key in data:
                record[key] = safe_float(data[key], default=record[key])
        capacity = FreezerCapacity.from_dict(record)
        Settings.set_json(FREEZER_KEY, capacity.to_dict())
        db.session.commit()

    payload = capacity.to_dict()
    payload['usable_volume'] = round(capacity.usable_volume, 4)
    return jsonify(payload)


# ============================================
# ROUTES - PERSONAS / PROFILES / BUDGET
# ============================================

@app.route('/api/personas')
def personas_list():
    return jsonify([
        {'id': persona_id, 'label': t['label'], 'description': t['description'], 'weekly_budget': t['weekly_budget']}
        for persona_id, t in PERSONA_TEMPLATES.items()
    ])


@app.route('/api/personas/<persona_id>/apply', methods=['POST'])
def persona_apply(persona_id):
    data = request_json()
    if persona_id not in PERSONA_TEMPLATES:
        raise PlanningInputError(f"Unknown persona: {persona_id}")

    profile = load_profile()
    if has_existing_customizations(profile) and not data.get('confirm'):
        return jsonify({
            'error': 'Applying this persona overwrites your current selections',
            'requires_confirmation': True,
        }), 409

    teen_factor, child_factor = portion_factors(profile)
    profile = apply_persona(persona_id, load_catalog(), profile,
                            prefer_staples=bool(data.get('prefer_staples')),
                            teen_factor=teen_factor, child_factor=child_factor)
    save_profile(profile)
    db.session.commit()
    return jsonify(profile.to_dict())


@app.route('/api/profiles')
def profiles_list():
    return jsonify([dict(preset, id=profile_id) for profile_id, preset in CONSUMPTION_PROFILES.items()])


@app.route('/api/profiles/<profile_id>/apply', methods=['POST'])
def profile_apply(profile_id):
    profile = apply_consumption_profile(profile_id, load_profile())
    save_profile(profile)
    db.session.commit()
    return jsonify(profile.to_dict())


@app.route('/api/demand')
def demand():
    profile = load_profile()
    result = calculate_demand(profile, load_catalog(), *portion_factors(profile))
    return jsonify(result.to_dict())


@app.route('/api/budget/scale', methods=['POST'])
def budget_scale():
    data = request_json()
    profile = load_profile()
    budget = safe_float(data.get('weekly_budget'), default=profile.weekly_budget, min_val=0)
    catalog = load_catalog()

    frequencies = auto_scale_to_budget(profile, catalog, budget, *portion_factors(profile))
    profile = profile.copy(slot_frequencies=frequencies, weekly_budget=budget)
    save_profile(profile)
    db.session.commit()

    result = calculate_demand(profile, catalog, *portion_factors(profile))
    return jsonify({'household': profile.to_dict(), 'demand': result.to_dict()})


# ============================================
# ROUTES - PLAN / CART
# ============================================

@app.route('/api/plan', methods=['POST'])
def plan_build():
    """
    Build the yearly plan from the household, keep manual cart lines,
    optionally swap premium boxes to meet budget, then fit the freezer.
    """
    data = request_json()
    profile = load_profile()
    catalog = load_catalog()

    result = build_purchase_plan(profile, catalog, *portion_factors(profile))
    plan = DeliveryPlan(lines=[line for line in load_plan(catalog).lines if line.source == SOURCE_MANUAL])
    for line in result.plan.lines:
        plan = add_to_plan(plan, line.product, line.quantities, line.source)

    if data.get('substitute_premium'):
        budget = safe_float(data.get('weekly_budget'), default=profile.weekly_budget, min_val=0)
        plan, _ = substitute_premium_items(plan, catalog, budget)

    simulation = simulate_freezer(plan, load_freezer().usable_volume)
    save_plan(simulation.plan)
    save_pickup(simulation)
    db.session.commit()

    payload = cart_payload(simulation.plan)
    payload['optimized_cost'] = round(result.total_cost, 2)
    payload['freezer'] = simulation.to_dict()
    return jsonify(payload)


@app.route('/api/cart')
def cart():
    return jsonify(cart_payload(load_plan(load_catalog())))


@app.route('/api/cart/update', methods=['POST'])
def cart_update():
    data = request_json()
    catalog = load_catalog()
    product = catalog.get(data.get('product_id'))
    if product is None:
        return jsonify({'error': 'Product not found'}), 404

    plan = update_quantity(load_plan(catalog), product, data.get('delivery_index'), data.get('delta', 1))
    save_plan(plan)
    db.session.commit()
    return jsonify(cart_payload(plan))


@app.route('/api/cart/delete/<product_id>', methods=['POST'])
def cart_delete(product_id):
    plan = load_plan(load_catalog())
    if plan.get_line(product_id) is None:
        return jsonify({'error': 'Product not in cart'}), 404

    plan = remove_from_plan(plan, product_id)
    save_plan(plan)
    db.session.commit()
    return jsonify(cart_payload(plan))


@app.route('/api/pickup')
def pickup_list():
    items = PickupItem.query.order_by(PickupItem.id).all()
    return jsonify([
        {'product_id': item.product_id, 'name': item.product.name if item.product else '',
         'delivery_index': item.delivery_index}
        for item in items
    ])


# ============================================
# ROUTES - CALENDAR
# ============================================

@app.route('/api/calendar')
def calendar():
    catalog = load_catalog()
    plan = load_plan(catalog)
    profile = load_profile()
    fingerprint = calendar_fingerprint(plan, profile)
    stored = load_calendar(catalog)

    if not stored or Settings.get_json(CALENDAR_FINGERPRINT_KEY) != fingerprint:
        stored = generate_calendar(plan, profile, next_plan_start(), previous=stored)
        save_calendar(stored)
        Settings.set_json(CALENDAR_FINGERPRINT_KEY, fingerprint)
        db.session.commit()

    return jsonify([day.to_dict() for day in stored])


@app.route('/api/calendar/swap', methods=['POST'])
def calendar_swap():
    data = request_json()
    stored = load_calendar(load_catalog())
    if not stored:
        return jsonify({'error': 'No calendar generated yet'}), 404

    swapped = swap_calendar_days(stored, data.get('index_a'), data.get('index_b'))
    save_calendar(swapped)
    db.session.commit()
    return jsonify([day.to_dict() for day in swapped])


# ============================================
# INITIALIZE DATABASE
# ============================================

def seed_catalog():
    """Load the default catalog into an empty product table."""
    if CatalogProduct.query.count() > 0:
        return 0
    for record in SEED_CATALOG:
        cleaned = clean_product_record(record)
        db.session.add(CatalogProduct(id=cleaned['id']).update_from_record(cleaned))
    db.session.commit()
    logger.info("Seeded catalog with %d products", len(SEED_CATALOG))
    return len(SEED_CATALOG)


def init_db():
    with app.app_context():
        # Enable SQLite foreign key enforcement
        from sqlalchemy import event
        from sqlalchemy.engine import Engine
        import sqlite3

        @event.listens_for(Engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            if isinstance(dbapi_connection, sqlite3.Connection):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        db.create_all()
        if app.config.get('SEED_CATALOG'):
            seed_catalog()


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0',
            port=int(os.environ.get('PORT', 5000)), use_reloader=False)
