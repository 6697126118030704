import click
from flask import Flask, render_template, request, redirect, url_for, flash
from flask_wtf.csrf import CSRFError
from flask_talisman import Talisman
import os
from dotenv import load_dotenv

from extensions import db, csrf
from repository import ProductRepository
from storage import ImageStorage

# Charger les variables d'environnement depuis .env
load_dotenv()

csp = {
    'default-src': [
        '\'self\'',
    ],
    'script-src': [
        '\'self\'',
        'https://cdn.jsdelivr.net',
    ],
    'style-src': [
        '\'self\'',
        '\'unsafe-inline\'',
        'https://cdn.jsdelivr.net',
    ],
    'font-src': [
        '\'self\'',
        'https://cdn.jsdelivr.net',
    ],
    'img-src': [
        '\'self\'',
        'data:',
    ],
    'connect-src': [
        '\'self\'',
    ],
}


def create_app(test_config=None, repository=None, storage=None):
    app = Flask(__name__)

    # Configuration (depuis .env)
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'dev')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv('DATABASE_URL', 'sqlite:///catalogue.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['IMAGES_FOLDER'] = os.getenv('IMAGES_FOLDER', os.path.join(app.static_folder, 'images'))
    app.config['MAX_CONTENT_LENGTH'] = int(os.getenv('MAX_CONTENT_LENGTH', 5 * 1024 * 1024))
    app.config['WTF_CSRF_ENABLED'] = os.getenv('WTF_CSRF_ENABLED', 'True').lower() == 'true'
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', 'INFO')
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    Talisman(app, content_security_policy=csp, force_https=False)
    csrf.init_app(app)
    db.init_app(app)

    # Le contrôleur récupère ses dépendances ici
    app.extensions['product_repository'] = repository or ProductRepository()
    app.extensions['image_storage'] = storage or ImageStorage(app.config['IMAGES_FOLDER'])

    from products import bp as product_bp
    app.register_blueprint(product_bp)

    register_error_handlers(app)
    register_commands(app)

    @app.route('/')
    def index():
        return redirect(url_for('product.index'))

    return app


def register_error_handlers(app):

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(413)
    def file_too_large(e):
        flash('Le fichier envoyé est trop volumineux.', 'danger')
        return redirect(request.referrer or url_for('product.index'))

    @app.errorhandler(500)
    def internal_server_error(e):
        return render_template('500.html'), 500

    @app.errorhandler(CSRFError)
    def csrf_error(error):
        flash('Le formulaire a expiré ou est invalide. Veuillez réessayer.', 'danger')
        return redirect(request.referrer or url_for('product.index'))


def register_commands(app):

    @app.cli.command('init-db')
    def init_db():
        """Crée les tables de la base de données."""
        db.create_all()
        app.logger.info("Tables créées")
        click.echo("Base de données initialisée.")


# Lancement de l'application
if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        db.create_all()
    app.run(debug=os.getenv('FLASK_DEBUG', 'False').lower() == 'true')
