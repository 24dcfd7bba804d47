import logging
import os
from flask import Flask
from config import CONFIG_BY_ENV, Config


def create_app(config_class=None):
    app = Flask(__name__)
    if config_class is None:
        config_class = CONFIG_BY_ENV.get(os.getenv('APP_ENV', 'production'), Config)
    app.config.from_object(config_class)

    # Heroku-style DATABASE_URL (postgres:// -> postgresql://)
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = db_uri.replace('postgres://', 'postgresql://', 1)

    # Logging
    logging.basicConfig(
        level=getattr(logging, app.config.get('LOG_LEVEL', 'INFO')),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    # Extensions
    from factboard.extensions import db, migrate, scheduler
    db.init_app(app)
    migrate.init_app(app, db)

    # Register blueprints
    from factboard.routes import register_blueprints, register_error_handlers
    register_blueprints(app)
    register_error_handlers(app)

    # Scheduler
    if app.config.get('SCHEDULER_ENABLED') and not app.config.get('TESTING'):
        scheduler.init_app(app)
        with app.app_context():
            from factboard.jobs.scheduled import register_jobs
            register_jobs(scheduler, app)
        scheduler.start()

    return app
