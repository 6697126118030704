"""Accès aux données du catalogue.

Le contrôleur ne dépend que de l'interface ``Repository``; l'implémentation
SQLAlchemy est injectée par la factory de l'application.
"""
from abc import ABC, abstractmethod

from extensions import db
from models import Product


class Repository(ABC):

    @abstractmethod
    def get(self, id):
        """Retourne l'entité, ou None si elle n'existe pas."""

    @abstractmethod
    def get_all(self):
        pass

    @abstractmethod
    def add(self, entity):
        """Persiste une nouvelle entité et la retourne avec son id."""

    @abstractmethod
    def update(self, entity):
        """Retourne None si l'entité à modifier n'existe plus."""

    @abstractmethod
    def delete(self, id):
        pass

    @abstractmethod
    def search(self, term):
        pass


class ProductRepository(Repository):

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        # la session scoped de Flask-SQLAlchemy n'existe que dans un contexte d'application
        return self._session if self._session is not None else db.session

    def get(self, id):
        return self.session.get(Product, id)

    def get_all(self):
        return Product.query.order_by(Product.id).all()

    def add(self, product):
        self.session.add(product)
        self.session.commit()
        return product

    def update(self, product):
        with self.session.no_autoflush:
            exists = self.session.query(Product.id).filter_by(id=product.id).first()
        if exists is None:
            self.session.rollback()
            return None
        product = self.session.merge(product)
        self.session.commit()
        return product

    def delete(self, id):
        product = self.get(id)
        if product is None:
            return None
        self.session.delete(product)
        self.session.commit()
        return product

    def search(self, term):
        term = (term or '').strip()
        if not term:
            return self.get_all()
        return (Product.query
                .filter(Product.designation.icontains(term, autoescape=True))
                .order_by(Product.id)
                .all())
