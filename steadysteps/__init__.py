import logging

from flask import Flask
from apscheduler.schedulers.background import BackgroundScheduler
from .config import Config
from .routes import register_routes
from .extensions import db, jwt, migrate
from .stores import STORE_EXTENSION_KEY, build_store


def create_app(config_object=Config, store=None):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

    db.init_app(app)
    jwt.init_app(app)
    migrate.init_app(app, db)
    register_routes(app)

    app.extensions[STORE_EXTENSION_KEY] = store or build_store(app.config)

    with app.app_context():
        from steadysteps.models import (
            user_profile,
            daily_checkin,
            earned_badge
        )
        db.create_all()

    from steadysteps.controller.user_profile_controller import user_profile_bp
    app.register_blueprint(user_profile_bp)

    from steadysteps.controller.checkin_controller import checkin_bp
    app.register_blueprint(checkin_bp)

    from steadysteps.controller.progress_controller import progress_bp
    app.register_blueprint(progress_bp)

    from steadysteps.controller.coach_controller import coach_bp
    app.register_blueprint(coach_bp)

    if app.config.get("SCHEDULER_ENABLED"):
        from steadysteps.services.not_behind_service import refresh_not_behind_for_all_users
        scheduler = BackgroundScheduler()
        scheduler.add_job(
            func=refresh_not_behind_for_all_users,
            trigger="cron",
            hour=0,
            minute=5,
            args=[app]
        )
        scheduler.start()

    return app
