import pytest

from app import create_app
from extensions import db
from models import Product


@pytest.fixture
def images_dir(tmp_path):
    path = tmp_path / 'images'
    path.mkdir()
    return path


@pytest.fixture
def config(images_dir):
    return {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'WTF_CSRF_ENABLED': False,
        'IMAGES_FOLDER': str(images_dir),
    }


@pytest.fixture
def app(config):
    """Application de test avec une base SQLite en mémoire."""
    app = create_app(config)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_product(app):
    def _add(designation='Clavier mécanique', prix=49.9, quantite=3, image=None):
        product = Product(designation=designation, prix=prix, quantite=quantite, image=image)
        db.session.add(product)
        db.session.commit()
        return product
    return _add
