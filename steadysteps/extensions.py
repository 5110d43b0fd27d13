from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
jwt = JWTManager()
migrate = Migrate()

# SQLite only autoincrements INTEGER primary keys
BigIntId = db.BigInteger().with_variant(db.Integer(), "sqlite")
