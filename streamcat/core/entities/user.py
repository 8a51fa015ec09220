"""
Entités utilisateur et liste de favoris.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """
    Compte utilisateur.

    Le mot de passe est opaque (pas de hachage : aucune authentification
    n'est faite, seule l'identité de démonstration est utilisée).
    """

    id: str
    username: str
    password: str


@dataclass
class UserListEntry:
    """
    Association "l'utilisateur a mis ce contenu en favori".

    Attributs:
        id: Identifiant unique de l'entrée
        user_id: Référence vers User
        content_id: Référence vers Content (non vérifiée par le stockage)
        added_at: Date d'ajout (UTC)
    """

    id: str
    user_id: str
    content_id: str
    added_at: datetime
