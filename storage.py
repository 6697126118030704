import os
import uuid

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename


class ImageStorage:
    """Stockage des images produit sur le disque local.

    Les fichiers sont nommés ``{uuid}_{nom d'origine}`` dans ``root``.
    """

    def __init__(self, root):
        self.root = root

    def path(self, filename):
        return os.path.join(self.root, filename)

    def save(self, file):
        if not isinstance(file, FileStorage) or not file.filename:
            return None
        os.makedirs(self.root, exist_ok=True)
        original = secure_filename(file.filename) or 'image'
        filename = f"{uuid.uuid4()}_{original}"
        file.save(self.path(filename))
        return filename

    def delete(self, filename):
        if not filename:
            return False
        filepath = self.path(os.path.basename(filename))
        if os.path.exists(filepath):
            os.remove(filepath)
            return True
        return False
