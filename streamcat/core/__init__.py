"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et les exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Content, User, UserListEntry)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
