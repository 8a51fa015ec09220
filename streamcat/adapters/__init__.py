"""
Adaptateurs d'entrée : chargement du catalogue initial.
"""
