from flask_wtf import FlaskForm
from flask_wtf.file import FileAllowed, FileField
from wtforms import FloatField, IntegerField, StringField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange

IMAGE_EXTENSIONS = ['jpg', 'jpeg', 'png', 'gif', 'webp']


class CreateProductForm(FlaskForm):
    designation = StringField(
        'Désignation',
        validators=[
            DataRequired(message="La désignation est obligatoire."),
            Length(min=5, max=50, message="La désignation doit contenir entre 5 et 50 caractères."),
        ],
    )
    prix = FloatField(
        'Prix en dinar :',
        validators=[
            InputRequired(message="Le prix est obligatoire."),
            NumberRange(min=0, message="Le prix ne peut pas être négatif."),
        ],
    )
    quantite = IntegerField(
        'Quantité en unité :',
        validators=[InputRequired(message="La quantité est obligatoire.")],
    )
    image = FileField(
        'Image :',
        validators=[FileAllowed(IMAGE_EXTENSIONS, "Seules les images sont acceptées.")],
    )


class EditProductForm(CreateProductForm):
    """Sans nouveau fichier, l'image existante du produit est conservée."""
