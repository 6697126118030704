from flask import (
    Blueprint,
    abort,
    current_app,
    flash,
    redirect,
    render_template,
    request,
    send_from_directory,
    url_for,
)
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import NotFound

from forms import CreateProductForm, EditProductForm
from models import Product

bp = Blueprint('product', __name__, url_prefix='/Product')

DELETE_ERROR_MESSAGE = "Une erreur est survenue lors de la suppression du produit. Veuillez réessayer."


def get_repository():
    return current_app.extensions['product_repository']


def get_storage():
    return current_app.extensions['image_storage']


def get_product_or_404(id):
    product = get_repository().get(id)
    if product is None:
        current_app.logger.warning(f"Produit {id} introuvable")
        abort(404)
    return product


@bp.route('', strict_slashes=False)
def index():
    products = get_repository().get_all()
    return render_template('product/index.html', products=products, term=None)


@bp.route('/Details/<int:id>')
def details(id):
    product = get_product_or_404(id)
    return render_template('product/details.html', product=product)


@bp.route('/Create', methods=['GET', 'POST'])
def create():
    form = CreateProductForm()
    if form.validate_on_submit():
        image = get_storage().save(form.image.data)
        product = Product(
            designation=form.designation.data,
            prix=form.prix.data,
            quantite=form.quantite.data,
            image=image,
        )
        get_repository().add(product)
        current_app.logger.info(f"Produit {product.id} créé : {product.designation}")
        flash('Produit créé avec succès !', 'success')
        return redirect(url_for('product.details', id=product.id))
    return render_template('product/create.html', form=form)


@bp.route('/Edit/<int:id>', methods=['GET', 'POST'])
def edit(id):
    product = get_product_or_404(id)
    form = EditProductForm(obj=product)
    if not isinstance(form.image.data, FileStorage):
        # sans envoi, le champ garde le nom de fichier du produit
        form.image.data = None
    if not form.validate_on_submit():
        return render_template('product/edit.html', form=form, product=product)

    storage = get_storage()
    previous_image = product.image
    product.designation = form.designation.data
    product.prix = form.prix.data
    product.quantite = form.quantite.data

    new_image = storage.save(form.image.data)
    if new_image:
        product.image = new_image

    updated = get_repository().update(product)
    if updated is None:
        # le produit a été supprimé entre-temps
        storage.delete(new_image)
        current_app.logger.warning(f"Produit {id} disparu pendant la modification")
        abort(404)

    if new_image and previous_image:
        storage.delete(previous_image)
    current_app.logger.info(f"Produit {id} modifié")
    flash('Produit modifié.', 'success')
    return redirect(url_for('product.index'))


@bp.route('/Delete/<int:id>', methods=['GET'])
def delete(id):
    product = get_product_or_404(id)
    return render_template('product/delete.html', product=product)


@bp.route('/Delete/<int:id>', methods=['POST'])
def delete_confirmed(id):
    try:
        product = get_product_or_404(id)
        image = product.image
        get_repository().delete(id)
        get_storage().delete(image)
        current_app.logger.info(f"Produit {id} supprimé")
        flash('Produit supprimé.', 'info')
        return redirect(url_for('product.index'))
    except NotFound:
        raise
    except Exception:
        current_app.logger.exception(f"Erreur lors de la suppression du produit {id}")
        return render_template('error.html', error_message=DELETE_ERROR_MESSAGE)


@bp.route('/Search')
def search():
    term = request.args.get('term', '')
    results = get_repository().search(term)
    return render_template('product/index.html', products=results, term=term)


@bp.route('/Image/<path:filename>')
def image(filename):
    return send_from_directory(get_storage().root, filename)
