"""docscore: évaluation d'un document distant selon une grille de sections.

Ce package fournit:
- Le chargement de la configuration (environnement / .env)
- Les structures typées de la grille et du résultat d'évaluation
- La récupération du fichier depuis GitHub ou Bitbucket
- Le découpage en sections et le calcul des scores
- Le rendu du rapport texte et l'écriture des sorties
- Un orchestrateur et une CLI pour lancer l'évaluation
"""

__all__ = [
    "config",
    "types",
    "rubric",
    "scoring",
    "report",
    "source_service",
    "storage",
    "writer",
    "orchestrator",
]
