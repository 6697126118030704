from extensions import db


class Product(db.Model):
    __tablename__ = 'products'

    id = db.Column(db.Integer, primary_key=True)
    designation = db.Column(db.String(50), nullable=False)
    prix = db.Column(db.Float, nullable=False, default=0)
    quantite = db.Column(db.Integer, nullable=False, default=0)
    image = db.Column(db.String(255), nullable=True)  # nom du fichier dans le dossier images

    def __repr__(self):
        return f'<Product {self.id} {self.designation}>'
