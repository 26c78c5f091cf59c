from datetime import datetime

from flask_sqlalchemy import SQLAlchemy

from agri_data import EVENT_TYPES

db = SQLAlchemy()


class CropEvent(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(120), nullable=False)
    crop_name = db.Column(db.String(100), nullable=False)
    event_type = db.Column(db.String(20), nullable=False, default='planting')
    event_date = db.Column(db.Date, nullable=False)
    notes = db.Column(db.String(500))
    reminder = db.Column(db.Boolean, default=True, nullable=False)
    reminder_at = db.Column(db.DateTime, nullable=True)
    reminder_sent = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def type_label(self):
        return EVENT_TYPES[self.event_type]['label']

    @property
    def css_class(self):
        return EVENT_TYPES[self.event_type]['css']

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'cropName': self.crop_name,
            'type': self.event_type,
            'date': self.event_date.isoformat(),
            'notes': self.notes,
            'reminder': self.reminder,
            'reminderAt': self.reminder_at.isoformat() if self.reminder_at else None,
        }

    def __repr__(self):
        return f'<CropEvent {self.title} on {self.event_date}>'


class Notification(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    message = db.Column(db.String(255), nullable=False)
    is_read = db.Column(db.Boolean, default=False)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow)
    category = db.Column(db.String(50), default='general')

    def to_dict(self):
        return {
            'id': self.id,
            'message': self.message,
            'is_read': self.is_read,
            'category': self.category,
            'timestamp': self.timestamp.isoformat(),
        }


class HardwareProduct(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    price_rupees = db.Column(db.Float, nullable=False)
    image_url = db.Column(db.String(255))
    category = db.Column(db.String(50), default='Sensors')
    has_cloud_analytics = db.Column(db.Boolean, default=False)
    cloud_analytics_price = db.Column(db.Float, nullable=True)
    in_stock = db.Column(db.Boolean, default=True)

    def offers_cloud_analytics(self):
        return bool(self.has_cloud_analytics and self.cloud_analytics_price)


class PestDetection(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    crop_type = db.Column(db.String(100), default='Unknown')
    pest_name = db.Column(db.String(255), default='Unknown')
    threat_level = db.Column(db.String(20), default='Unknown')
    description = db.Column(db.Text, default='')
    damage = db.Column(db.Text, default='')
    treatment = db.Column(db.Text, default='')
    prevention = db.Column(db.Text, default='')
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


def create_notification(message, category='general'):
    notif = Notification(message=message[:255], category=category)
    db.session.add(notif)
    return notif
