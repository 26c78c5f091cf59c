import base64
import io
import logging
import math
import os
from datetime import date

from flask import Flask, render_template, request, redirect, url_for, flash, jsonify, session, abort
from dotenv import load_dotenv
from PIL import Image, UnidentifiedImageError

import advisors
import planner
import weather
from agri_data import (CROPS, REGIONS, IRRIGATION_TYPES, SOIL_TYPES, SEASONS, GROWTH_STAGES,
                       EVENT_TYPES, SAMPLE_PRODUCTS)
from advisors import MissingFieldError
from gateway import GatewayError
from locales import LANGUAGES, normalize_language, translate
from models import db, CropEvent, Notification, HardwareProduct, PestDetection, create_notification

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# --- Flask App Initialization ---
load_dotenv()
app = Flask(__name__)

# --- Configuration Setup ---
app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY')
app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///agrinova.db')
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
app.config['MAX_CONTENT_LENGTH'] = 16 * 1024 * 1024

app.config['AI_PROVIDER'] = os.environ.get('AI_PROVIDER', 'gateway')
app.config['AI_GATEWAY_API_KEY'] = os.environ.get('AI_GATEWAY_API_KEY')
app.config['AI_GATEWAY_URL'] = os.environ.get('AI_GATEWAY_URL', 'https://ai.gateway.lovable.dev/v1/chat/completions')
app.config['AI_GATEWAY_MODEL'] = os.environ.get('AI_GATEWAY_MODEL', 'google/gemini-3-flash-preview')
app.config['AI_VISION_MODEL'] = os.environ.get('AI_VISION_MODEL', 'google/gemini-2.5-flash')
app.config['GOOGLE_API_KEY'] = os.environ.get('GOOGLE_API_KEY')
app.config['GEMINI_MODEL'] = os.environ.get('GEMINI_MODEL', 'gemini-2.5-flash')
app.config['AI_REQUEST_TIMEOUT'] = float(os.environ.get('AI_REQUEST_TIMEOUT', 60))

if not app.config['SECRET_KEY']:
    app.config['SECRET_KEY'] = 'dev-secret-key'
    logger.warning("SECRET_KEY is missing from .env. Using an insecure development key.")

if app.config['AI_PROVIDER'] == 'gemini' and not app.config['GOOGLE_API_KEY']:
    logger.warning("GOOGLE_API_KEY is missing from .env. AI features will fail.")
elif app.config['AI_PROVIDER'] != 'gemini' and not app.config['AI_GATEWAY_API_KEY']:
    logger.warning("AI_GATEWAY_API_KEY is missing from .env. AI features will fail.")

db.init_app(app)

MAX_IMAGE_BYTES = 10 * 1024 * 1024
RATE_LIMITED_TOAST = "Too many requests. Please wait a moment."
UNAVAILABLE_TOAST = "Service temporarily unavailable."


# --- Helpers ---
def user_error_message(error, fallback):
    """Maps a gateway failure onto the message shown to the farmer."""
    if error.status == 429:
        return RATE_LIMITED_TOAST
    if error.status == 402:
        return UNAVAILABLE_TOAST
    return fallback


def call_advisor(func, failure_message, **fields):
    """Runs an advisor for a page route; flashes and returns None on failure."""
    try:
        return func(**fields)
    except MissingFieldError:
        flash("Please fill in all required fields", 'danger')
    except GatewayError as e:
        logger.error(f"{func.__name__} failed ({e.status}): {e.message}")
        flash(user_error_message(e, failure_message), 'danger')
    except weather.WeatherError as e:
        flash(str(e), 'danger')
    return None


def read_image_upload(file_storage):
    """
    Turns an uploaded image into a base64 data URL.
    Raises ValueError with a user-facing message when the upload is unusable.
    """
    if file_storage is None or not file_storage.filename:
        raise ValueError("Please upload an image of your crops first.")

    image_bytes = file_storage.read()
    if len(image_bytes) > MAX_IMAGE_BYTES:
        raise ValueError("Please upload an image smaller than 10MB.")

    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            img.verify()
            mime_type = Image.MIME.get(img.format, 'image/jpeg')
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"Rejected upload {file_storage.filename!r}: {e}")
        raise ValueError("Please upload a valid image file.") from e

    encoded = base64.b64encode(image_bytes).decode('utf-8')
    return f"data:{mime_type};base64,{encoded}"


def format_inr(amount):
    """Indian digit grouping: 123456 -> 1,23,456. Non-numeric values pass through."""
    try:
        value = int(round(float(amount or 0)))
    except (TypeError, ValueError):
        return str(amount)
    sign = '-' if value < 0 else ''
    digits = str(abs(value))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])


def parse_float(value):
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


app.jinja_env.filters['inr'] = format_inr


@app.context_processor
def inject_globals():
    language = normalize_language(session.get('language', 'en'))
    unread = Notification.query.filter_by(is_read=False).count()
    return {
        't': lambda key: translate(key, language),
        'current_language': language,
        'languages': LANGUAGES,
        'language_chosen': 'language' in session,
        'unread_notifications': unread,
        'event_types': EVENT_TYPES,
    }


# --- Frontend Routes ---
@app.route('/')
def home():
    return render_template('index.html')


@app.route('/language/<code>', methods=['GET', 'POST'])
def choose_language(code):
    session['language'] = normalize_language(code)
    return redirect(request.referrer or url_for('home'))


# Crop planner
def _calendar_month():
    try:
        return planner.parse_month(request.args.get('month', ''))
    except ValueError:
        today = date.today()
        return today.year, today.month


def render_planner(form_values=None, errors=None, editing=None, status=200):
    planner.send_due_reminders()
    year, month = _calendar_month()
    events = CropEvent.query.order_by(CropEvent.event_date).all()
    prev_year, prev_month = planner.shift_month(year, month, -1)
    next_year, next_month = planner.shift_month(year, month, 1)

    if form_values is None:
        if editing:
            form_values = {
                'crop_name': editing.crop_name,
                'event_type': editing.event_type,
                'event_date': editing.event_date.isoformat(),
                'notes': editing.notes or '',
                'reminder': editing.reminder,
            }
        else:
            form_values = {
                'crop_name': '',
                'event_type': 'planting',
                'event_date': request.args.get('date') or date.today().isoformat(),
                'notes': '',
                'reminder': True,
            }

    return render_template(
        'planner.html',
        month_label=date(year, month, 1).strftime('%B %Y'),
        weeks=planner.month_grid(year, month, events),
        weekdays=planner.WEEKDAYS,
        prev_month=f"{prev_year}-{prev_month:02d}",
        next_month=f"{next_year}-{next_month:02d}",
        upcoming=planner.upcoming_events(events),
        form_values=form_values,
        errors=errors or {},
        editing=editing,
    ), status


@app.route('/planner')
def planner_page():
    editing = None
    edit_id = request.args.get('edit', type=int)
    if edit_id:
        editing = db.session.get(CropEvent, edit_id)
        if not editing:
            flash("Event not found.", 'danger')
    return render_planner(editing=editing)


@app.route('/planner/events', methods=['POST'])
def create_event():
    data, errors = planner.validate_event_form(request.form)
    if errors:
        for message in errors.values():
            flash(message, 'danger')
        return render_planner(form_values=request.form.to_dict(), errors=errors, status=400)

    event = planner.apply_event_data(CropEvent(), data)
    db.session.add(event)
    db.session.commit()
    label = EVENT_TYPES[event.event_type]['label'].lower()
    flash(f"Event Scheduled: {event.crop_name} {label} scheduled"
          f"{' with reminder' if event.reminder else ''}.", 'success')
    return redirect(url_for('planner_page', month=event.event_date.strftime('%Y-%m')))


@app.route('/planner/events/<int:event_id>', methods=['POST'])
def update_event(event_id):
    event = db.session.get(CropEvent, event_id)
    if not event:
        abort(404)

    data, errors = planner.validate_event_form(request.form)
    if errors:
        for message in errors.values():
            flash(message, 'danger')
        return render_planner(form_values=request.form.to_dict(), errors=errors, editing=event, status=400)

    planner.apply_event_data(event, data)
    db.session.commit()
    label = EVENT_TYPES[event.event_type]['label'].lower()
    flash(f"Event Updated: {event.crop_name} {label} has been updated.", 'success')
    return redirect(url_for('planner_page', month=event.event_date.strftime('%Y-%m')))


@app.route('/planner/events/<int:event_id>/delete', methods=['POST'])
def delete_event(event_id):
    event = db.session.get(CropEvent, event_id)
    if not event:
        abort(404)
    db.session.delete(event)
    db.session.commit()
    flash("Event Deleted: The event has been removed from your calendar.", 'danger')
    return redirect(url_for('planner_page'))


# Pest detector
@app.route('/pest-detector', methods=['GET', 'POST'])
def pest_detector():
    result = None
    crop_type = request.form.get('crop_type', '').strip()

    if request.method == 'POST':
        try:
            image = read_image_upload(request.files.get('image'))
        except ValueError as e:
            flash(str(e), 'danger')
            return render_template('pest_detector.html', result=None, crop_type=crop_type), 400

        result = call_advisor(advisors.identify_pest,
                              "Failed to analyze the image. Please try again.",
                              imageBase64=image, cropType=crop_type)
        if result is not None:
            save_pest_detection(result, crop_type)
            flash(f"Analysis complete: Identified: {result.get('pestName') or 'See results below'}. "
                  f"Saved to history.", 'success')

    return render_template('pest_detector.html', result=result, crop_type=crop_type)


def save_pest_detection(result, crop_type):
    detection = PestDetection(
        crop_type=crop_type or 'Unknown',
        pest_name=result.get('pestName') or 'Unknown',
        threat_level=result.get('threatLevel') or 'Unknown',
        description=result.get('description') or '',
        damage=result.get('damageDescription') or '',
        treatment=_joined(result.get('treatment')),
        prevention=_joined(result.get('prevention')),
    )
    db.session.add(detection)
    db.session.commit()
    return detection


def _joined(steps):
    if isinstance(steps, str):
        return steps
    return '; '.join(str(step) for step in steps or [])


@app.route('/pest-history')
def pest_history():
    detections = PestDetection.query.order_by(PestDetection.created_at.desc()).all()
    return render_template('pest_history.html', detections=detections)


# Crop health scanner
@app.route('/crop-health', methods=['GET', 'POST'])
def crop_health():
    health = None
    crop_type = request.form.get('crop_type', '').strip()

    if request.method == 'POST':
        try:
            image = read_image_upload(request.files.get('image'))
        except ValueError as e:
            flash(str(e), 'danger')
            return render_template('crop_health.html', health=None, crop_type=crop_type), 400

        health = call_advisor(advisors.scan_crop_health,
                              "Could not analyze the image. Please try again.",
                              imageBase64=image, cropType=crop_type)
        if health is not None:
            flash(f"Analysis complete! Overall health score: {health.get('overallHealthScore')}/100", 'success')

    return render_template('crop_health.html', health=health, crop_type=crop_type,
                           categories=advisors.HEALTH_CATEGORIES, score_band=advisors.health_score_band)


# Crop advisor
@app.route('/crop-advisor', methods=['GET', 'POST'])
def crop_advisor():
    advice = None
    form = request.form

    if request.method == 'POST':
        crop = form.get('custom_crop', '').strip() if form.get('crop_type') == 'other' else form.get('crop_type', '')
        location = (form.get('custom_location', '').strip() if form.get('location') == 'other'
                    else form.get('location', ''))
        if not crop or not location:
            flash("Please enter crop type and location", 'danger')
            return _render_crop_advisor(None, 400)

        data = call_advisor(advisors.crop_advice, "Failed to get advice. Please try again.",
                            cropType=crop, location=location,
                            growthStage=form.get('growth_stage') or None,
                            soilType=form.get('soil_type') or None)
        if data is not None:
            advice = data['advice']
            flash("Advice generated successfully!", 'success')

    return _render_crop_advisor(advice)


def _render_crop_advisor(advice, status=200):
    return render_template('crop_advisor.html', advice=advice, form=request.form,
                           crops=CROPS, regions=REGIONS, growth_stages=GROWTH_STAGES,
                           soil_types=SOIL_TYPES), status


# Weather advisor
@app.route('/weather', methods=['GET', 'POST'])
def weather_page():
    data = None
    location = request.form.get('location', '').strip()

    if request.method == 'POST':
        lat = parse_float(request.form.get('lat'))
        lon = parse_float(request.form.get('lon'))

        if lat is not None and lon is not None:
            label = location or "Current Location"
        else:
            if not location:
                flash("Enter a location: Please enter a city or region name.", 'danger')
                return render_template('weather.html', data=None, location=location), 400
            try:
                place = weather.geocode(location)
            except weather.WeatherError as e:
                flash(str(e), 'danger')
                return render_template('weather.html', data=None, location=location), 502
            if place is None:
                flash("Location not found: Please try a different location name.", 'danger')
                return render_template('weather.html', data=None, location=location), 404
            lat, lon, label = place['latitude'], place['longitude'], place['label']

        data = call_advisor(advisors.weather_advice, "Failed to get advice. Please try again later.",
                            latitude=lat, longitude=lon, location=label)
        if data is not None:
            flash(f"Weather advice ready: Got farming recommendations for {label}", 'success')

    return render_template('weather.html', data=data, location=location,
                           icon=weather.weather_icon(data['weather']['weatherCode']) if data else None)


# Market advisor
@app.route('/market', methods=['GET', 'POST'])
def market_page():
    analysis = None
    form = request.form

    if request.method == 'POST':
        crop = form.get('crop', '').strip()
        region = form.get('region', '').strip()
        if not crop or not region:
            flash("Please select a crop and region", 'danger')
            return _render_market(None, 400)

        analysis = call_advisor(advisors.market_analysis, "Failed to analyze market. Please try again.",
                                crop=crop, region=region,
                                season=form.get('season') or None,
                                farmSize=parse_float(form.get('farm_size')))
        if analysis is not None:
            flash("Market analysis complete!", 'success')

    return _render_market(analysis)


def _render_market(analysis, status=200):
    return render_template('market.html', analysis=analysis, form=request.form,
                           crops=CROPS, regions=REGIONS, seasons=SEASONS), status


# Crop simulator
@app.route('/simulator', methods=['GET', 'POST'])
def simulator_page():
    result = None
    form = request.form

    if request.method == 'POST':
        land_size = parse_float(form.get('land_size'))
        budget = parse_float(form.get('budget')) or advisors.DEFAULT_BUDGET
        if not form.get('crop') or not form.get('region') or not land_size or not form.get('irrigation_type'):
            flash("Please fill in all fields", 'danger')
            return _render_simulator(None, 400)

        result = call_advisor(advisors.simulate_crop, "Failed to run simulation. Please try again.",
                              crop=form['crop'], region=form['region'], landSize=land_size,
                              budget=int(budget), irrigationType=form['irrigation_type'])
        if result is not None:
            flash("Simulation complete!", 'success')

    return _render_simulator(result)


def _render_simulator(result, status=200):
    return render_template('simulator.html', result=result, form=request.form,
                           crops=CROPS, regions=REGIONS, irrigation_types=IRRIGATION_TYPES,
                           default_budget=advisors.DEFAULT_BUDGET), status


# Harvest predictor
@app.route('/harvest', methods=['GET', 'POST'])
def harvest_page():
    result = None
    form = request.form

    if request.method == 'POST':
        if not form.get('crop') or not form.get('region') or not form.get('planting_date'):
            flash("Please fill in all required fields", 'danger')
            return _render_harvest(None, 400)

        result = call_advisor(advisors.predict_harvest, "Failed to generate prediction. Please try again.",
                              crop=form['crop'], region=form['region'],
                              plantingDate=form['planting_date'],
                              fieldConditions=form.get('field_conditions', '').strip() or None)
        if result is not None:
            flash("Prediction generated!", 'success')

    return _render_harvest(result)


def _render_harvest(result, status=200):
    return render_template('harvest.html', result=result, form=request.form,
                           crops=CROPS, regions=REGIONS), status


# Hardware store
def cart_items():
    """Session cart resolved against the product table, skipping products that no longer exist."""
    items = []
    for index, entry in enumerate(session.get('cart', [])):
        product = db.session.get(HardwareProduct, entry['product_id'])
        if not product:
            continue
        with_cloud = bool(entry.get('cloud')) and product.offers_cloud_analytics()
        total = product.price_rupees + (product.cloud_analytics_price if with_cloud else 0)
        items.append({'index': index, 'product': product, 'cloud': with_cloud, 'total': total})
    return items


@app.route('/store')
def store():
    products = HardwareProduct.query.filter_by(in_stock=True).order_by(HardwareProduct.price_rupees.asc()).all()
    items = cart_items()
    return render_template('store.html', products=products, cart=items,
                           cart_total=sum(item['total'] for item in items))


@app.route('/store/cart/add/<int:product_id>', methods=['POST'])
def add_to_cart(product_id):
    product = db.session.get(HardwareProduct, product_id)
    if not product or not product.in_stock:
        flash("Product not found or out of stock.", 'danger')
        return redirect(url_for('store'))

    with_cloud = request.form.get('cloud_analytics') == 'on' and product.offers_cloud_analytics()
    cart = session.get('cart', [])
    cart.append({'product_id': product.id, 'cloud': with_cloud})
    session['cart'] = cart
    flash(f"Added to cart! {product.name}{' with Cloud Analytics' if with_cloud else ''} added to your cart.",
          'success')
    return redirect(url_for('store'))


@app.route('/store/cart/remove/<int:index>', methods=['POST'])
def remove_from_cart(index):
    cart = session.get('cart', [])
    if 0 <= index < len(cart):
        cart.pop(index)
        session['cart'] = cart
    return redirect(url_for('store'))


@app.route('/store/checkout', methods=['POST'])
def checkout():
    items = cart_items()
    if not items:
        flash("Your cart is empty", 'warning')
        return redirect(url_for('store'))

    total = format_inr(sum(item['total'] for item in items))
    create_notification(f"Order placed for {len(items)} item(s), total ₹{total}.", 'order')
    db.session.commit()
    session['cart'] = []
    flash(f"Order placed! Your order of ₹{total} has been placed. We'll contact you shortly.", 'success')
    return redirect(url_for('store'))


# Notifications
@app.route('/notifications')
def notifications_page():
    planner.send_due_reminders()
    notifications = Notification.query.order_by(Notification.timestamp.desc()).limit(20).all()
    page = render_template('notifications.html', notifications=notifications)
    for notif in notifications:
        notif.is_read = True
    db.session.commit()
    return page


# --- API Routes ---

# 1. AI endpoints, one per advisor
API_ENDPOINTS = {
    'crop-advisor': (advisors.crop_advice, ('cropType', 'location', 'growthStage', 'soilType')),
    'crop-health-scanner': (advisors.scan_crop_health, ('imageBase64', 'cropType')),
    'crop-simulator': (advisors.simulate_crop, ('crop', 'region', 'landSize', 'budget', 'irrigationType')),
    'harvest-predictor': (advisors.predict_harvest, ('crop', 'region', 'plantingDate', 'fieldConditions')),
    'market-advisor': (advisors.market_analysis, ('crop', 'region', 'season', 'farmSize')),
    'weather-advisor': (advisors.weather_advice, ('latitude', 'longitude', 'location')),
    'identify-pest': (advisors.identify_pest, ('imageBase64', 'cropType')),
}


def json_body():
    """The request's JSON object, or None when the body is missing or not an object."""
    body = request.get_json(silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


NOT_AN_OBJECT = {"error": "Request body must be a JSON object"}


@app.route('/api/<endpoint>', methods=['POST'])
def ai_endpoint(endpoint):
    if endpoint not in API_ENDPOINTS:
        return jsonify({"error": f"Unknown endpoint: {endpoint}"}), 404

    func, fields = API_ENDPOINTS[endpoint]
    body = json_body()
    if body is None:
        return jsonify(NOT_AN_OBJECT), 400
    try:
        result = func(**{field: body.get(field) for field in fields})
    except MissingFieldError as e:
        return jsonify({"error": str(e)}), 400
    except GatewayError as e:
        return jsonify({"error": e.message}), e.status
    except weather.WeatherError as e:
        return jsonify({"error": str(e)}), 500
    return jsonify(result), 200


# 2. Crop event CRUD
@app.route('/api/events', methods=['GET'])
def list_events():
    query = CropEvent.query
    month = request.args.get('month')
    if month:
        try:
            year, month_num = planner.parse_month(month)
        except ValueError:
            return jsonify({"error": "month must be YYYY-MM"}), 400
        start = date(year, month_num, 1)
        next_year, next_month = planner.shift_month(year, month_num, 1)
        query = query.filter(CropEvent.event_date >= start,
                             CropEvent.event_date < date(next_year, next_month, 1))
    events = query.order_by(CropEvent.event_date).all()
    return jsonify([e.to_dict() for e in events])


@app.route('/api/events', methods=['POST'])
def api_create_event():
    body = json_body()
    if body is None:
        return jsonify(NOT_AN_OBJECT), 400
    data, errors = planner.validate_event_form(body, default_reminder=True)
    if errors:
        return jsonify({"errors": errors}), 400
    event = planner.apply_event_data(CropEvent(), data)
    db.session.add(event)
    db.session.commit()
    return jsonify(event.to_dict()), 201


@app.route('/api/events/<int:event_id>', methods=['GET'])
def api_get_event(event_id):
    event = db.session.get(CropEvent, event_id)
    if not event:
        return jsonify({"error": "Event not found"}), 404
    return jsonify(event.to_dict())


@app.route('/api/events/<int:event_id>', methods=['PUT'])
def api_update_event(event_id):
    event = db.session.get(CropEvent, event_id)
    if not event:
        return jsonify({"error": "Event not found"}), 404
    body = json_body()
    if body is None:
        return jsonify(NOT_AN_OBJECT), 400
    data, errors = planner.validate_event_form(body, default_reminder=event.reminder)
    if errors:
        return jsonify({"errors": errors}), 400
    planner.apply_event_data(event, data)
    db.session.commit()
    return jsonify(event.to_dict())


@app.route('/api/events/<int:event_id>', methods=['DELETE'])
def api_delete_event(event_id):
    event = db.session.get(CropEvent, event_id)
    if not event:
        return jsonify({"error": "Event not found"}), 404
    db.session.delete(event)
    db.session.commit()
    return jsonify({"message": "Event deleted", "id": event_id})


# 3. Notifications and products
@app.route('/api/notifications', methods=['GET'])
def api_notifications():
    planner.send_due_reminders()
    notifications = Notification.query.order_by(Notification.timestamp.desc()).all()
    return jsonify([n.to_dict() for n in notifications])


@app.route('/api/notifications/<int:notification_id>/read', methods=['POST'])
def api_mark_read(notification_id):
    notif = db.session.get(Notification, notification_id)
    if not notif:
        return jsonify({"error": "Notification not found"}), 404
    notif.is_read = True
    db.session.commit()
    return jsonify(notif.to_dict())


@app.route('/api/products', methods=['GET'])
def api_products():
    products = HardwareProduct.query.filter_by(in_stock=True).order_by(HardwareProduct.price_rupees.asc()).all()
    return jsonify([{
        'id': p.id,
        'name': p.name,
        'description': p.description,
        'price_rupees': p.price_rupees,
        'image_url': p.image_url,
        'category': p.category,
        'has_cloud_analytics': p.has_cloud_analytics,
        'cloud_analytics_price': p.cloud_analytics_price,
        'in_stock': p.in_stock,
    } for p in products])


# --- Database setup ---
def seed_database():
    if not HardwareProduct.query.first():
        for product in SAMPLE_PRODUCTS:
            db.session.add(HardwareProduct(**product))
        db.session.commit()
        logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} hardware products.")
    if not CropEvent.query.first():
        planner.seed_sample_events()
        logger.info("Seeded sample crop events.")


@app.cli.command('init-db')
def init_db_command():
    """Create tables and load the sample catalogue."""
    db.create_all()
    seed_database()
    print("Database initialized.")


# --- Main Run Block ---
if __name__ == '__main__':
    with app.app_context():
        db.create_all()
        seed_database()
    app.run(debug=True)
