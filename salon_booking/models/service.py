from salon_booking import db


class ServiceCategory(db.Model):
    __tablename__ = 'service_categories'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    image = db.Column(db.String(255), nullable=False)

    def __init__(self, name, image):
        self.name = name
        self.image = image

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'image': self.image}

    def __repr__(self):
        return f'<ServiceCategory {self.name}>'


class Service(db.Model):
    __tablename__ = 'services'

    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(db.Integer, db.ForeignKey('service_categories.id'), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    duration_minutes = db.Column(db.Integer, nullable=False)  # Duration in minutes
    image = db.Column(db.String(255), nullable=False)

    def __init__(self, category_id, name, price, duration_minutes, image):
        self.category_id = category_id
        self.name = name
        self.price = price
        self.duration_minutes = duration_minutes
        self.image = image

    def to_dict(self):
        return {
            'id': self.id,
            'categoryId': self.category_id,
            'name': self.name,
            'price': self.price,
            'duration': self.duration_minutes,
            'image': self.image
        }

    def __repr__(self):
        return f'<Service {self.name}>'
