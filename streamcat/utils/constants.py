"""
Constantes globales pour StreamCat.

Ce module contient les constantes partagées :
- Image de remplacement pour les membres du casting sans photo
- Segments d'URL du lecteur embarqué par type de contenu
- Alias acceptés pour la classification indicative
"""

# Image affichée quand un membre du casting n'a pas de photo
PLACEHOLDER_PHOTO = "https://placehold.co/138x175?text=%3F"

# Segment d'URL du lecteur embarqué selon le type ("filme" / "serie")
EMBED_PATH_SEGMENTS = {
    "movie": "filme",
    "series": "serie",
}

# Alias de la classification "tous publics"
FREE_CLASSIFICATION_ALIASES = frozenset({"l", "free", "livre"})
