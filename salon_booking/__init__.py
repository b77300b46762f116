# Import important modules and create app package
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_mail import Mail

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
mail = Mail()


def create_app(config_object=None, **overrides):
    # Initialize app
    app = Flask(__name__)

    # Configure app
    from salon_booking.config import Config
    app.config.from_object(config_object or Config)
    app.config.update(overrides)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    from salon_booking.utils.json_utils import DecimalJSONProvider
    app.json = DecimalJSONProvider(app)

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)
    mail.init_app(app)

    from salon_booking.storage import create_storage
    storage = create_storage(app.config['STORAGE_BACKEND'])
    app.extensions['storage'] = storage

    from salon_booking.errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints
    from salon_booking.auth.routes import auth_bp
    from salon_booking.main.routes import main_bp
    from salon_booking.client.routes import client_bp
    from salon_booking.admin.routes import admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(main_bp)
    app.register_blueprint(client_bp)
    app.register_blueprint(admin_bp)

    from salon_booking.seed import seed_command, seed_defaults
    app.cli.add_command(seed_command)

    with app.app_context():
        if app.config['STORAGE_BACKEND'] == 'sql':
            db.create_all()
            app.logger.info("Database tables created (if they didn't exist)")

        if app.config['SEED_DEFAULTS'] and storage.is_empty():
            seed_defaults(storage)
            app.logger.info(f"Seeded default data into {app.config['STORAGE_BACKEND']} storage")

    return app
