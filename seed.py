from feedback_service import create_app
from feedback_service.extensions import db
from feedback_service.models.category import Category
from feedback_service.services.feedback_fixtures import CATEGORIES

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    for category_id, name in CATEGORIES:
        category = db.session.get(Category, category_id)
        if category is None:
            db.session.add(Category(id=category_id, name=name))
        elif category.name != name:
            category.name = name

    db.session.commit()
    print(f"Seeded {len(CATEGORIES)} categories.")
