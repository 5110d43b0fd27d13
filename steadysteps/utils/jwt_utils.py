from flask_jwt_extended import get_jwt_identity


def get_current_user_id():
    identity = get_jwt_identity()
    if not identity:
        return None
    return str(identity)
