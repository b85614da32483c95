from .home_routes import home_bp
from .feedback_routes import feedback_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(feedback_bp)
