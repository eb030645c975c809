"""
CineHook - Resolution d'identite et de metadonnees de films via TMDB.

Ce package transforme une requete (titre libre, nom de release, ID IMDb ou
TMDB) en fiches de films canoniques pour un gestionnaire de bibliotheque :
routage de la requete, appel TMDB avec pause sur quota bas, conversion des
ressources en entites, calcul du statut de sortie et decouverte filtree.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, exceptions)
- services/ : Couche application (routage, mapping, resolution, decouverte)
- adapters/ : Couche infrastructure (clients API, parsing, bibliotheque, CLI)
"""
