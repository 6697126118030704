import pytest

from extensions import db
from models import Product
from repository import ProductRepository


@pytest.fixture
def repo(app):
    return ProductRepository()


class TestProductRepository:

    def test_add_assigns_id(self, repo):
        product = repo.add(Product(designation='Clavier mécanique', prix=49.9, quantite=3))
        assert product.id is not None
        assert repo.get(product.id) is product

    def test_get_missing(self, repo):
        assert repo.get(42) is None

    def test_get_all_ordered_by_id(self, repo, add_product):
        first = add_product(designation='Premier produit')
        second = add_product(designation='Second produit')
        assert repo.get_all() == [first, second]

    def test_update_existing(self, repo, add_product):
        product = add_product(prix=10.0)
        product.prix = 12.5
        assert repo.update(product) is product
        db.session.expire_all()
        assert repo.get(product.id).prix == 12.5

    def test_update_missing_returns_none(self, repo):
        ghost = Product(id=999, designation='Produit fantôme', prix=1.0, quantite=1)
        assert repo.update(ghost) is None
        assert repo.get(999) is None

    def test_delete_returns_removed_product(self, repo, add_product):
        product = add_product(designation='À supprimer')
        removed = repo.delete(product.id)
        assert removed.designation == 'À supprimer'
        assert repo.get(product.id) is None

    def test_delete_missing(self, repo):
        assert repo.delete(42) is None


class TestSearch:

    @pytest.fixture(autouse=True)
    def catalogue(self, add_product):
        add_product(designation='Clavier mécanique')
        add_product(designation='Souris optique')
        add_product(designation='Remise 100% garantie')

    def test_case_insensitive_substring(self, repo):
        results = repo.search('CLAVIER')
        assert [p.designation for p in results] == ['Clavier mécanique']

    def test_blank_term_returns_everything(self, repo):
        assert len(repo.search('')) == 3
        assert len(repo.search('   ')) == 3
        assert len(repo.search(None)) == 3

    def test_wildcards_are_literal(self, repo):
        assert [p.designation for p in repo.search('100%')] == ['Remise 100% garantie']
        assert repo.search('_') == []

    def test_no_match(self, repo):
        assert repo.search('écran') == []
