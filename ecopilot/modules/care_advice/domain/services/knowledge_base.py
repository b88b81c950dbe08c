# 📄 File: ecopilot/modules/care_advice/domain/services/knowledge_base.py
# 🧭 Purpose (Layman Explanation):
# A small built-in plant encyclopedia used when the internet search can't help:
# Monstera, Pothos, Snake Plant, and general advice for anything else.
# 🧪 Purpose (Technical Summary):
# Static bilingual care sheets and the lookup rule matching a free-text query to an
# entry, with a generic houseplant entry as the default.
# 🔗 Dependencies:
# care models
# 🔄 Connected Modules / Calls From:
# care_advice_service.py, tests

from typing import Dict

from ..models.care import CareSheet, KnowledgeEntry

KNOWLEDGE_BASE: Dict[str, KnowledgeEntry] = {
    "monstera": KnowledgeEntry(
        key="monstera",
        sheets={
            "fr": CareSheet(
                name="Monstera Deliciosa",
                care="Arroser quand le sol est sec, lumière indirecte, humidité élevée",
                tips="Essuyer les feuilles régulièrement, supporter avec un tuteur",
                frequency="7-10 jours",
                problems="Feuilles jaunes = trop d'eau, feuilles brunes = air trop sec",
            ),
            "en": CareSheet(
                name="Monstera Deliciosa",
                care="Water when soil is dry, indirect light, high humidity",
                tips="Wipe leaves regularly, provide support with moss pole",
                frequency="7-10 days",
                problems="Yellow leaves = overwatering, brown leaves = low humidity",
            ),
        },
    ),
    "pothos": KnowledgeEntry(
        key="pothos",
        sheets={
            "fr": CareSheet(
                name="Pothos",
                care="Très facile, tolère la négligence, lumière faible à moyenne",
                tips="Parfait pour débuter, se propage facilement dans l'eau",
                frequency="7-14 jours",
                problems="Très résistant, surveiller l'arrosage excessif",
            ),
            "en": CareSheet(
                name="Pothos",
                care="Very easy, tolerates neglect, low to medium light",
                tips="Perfect for beginners, propagates easily in water",
                frequency="7-14 days",
                problems="Very resilient, watch for overwatering",
            ),
        },
    ),
    "snake plant": KnowledgeEntry(
        key="snake plant",
        sheets={
            "fr": CareSheet(
                name="Sansevieria (Langue de Belle-Mère)",
                care="Très peu d'eau, tolère la sécheresse, lumière faible",
                tips="Parfait pour les débutants, purifie l'air",
                frequency="14-21 jours",
                problems="Pourriture des racines si trop arrosé",
            ),
            "en": CareSheet(
                name="Sansevieria (Snake Plant)",
                care="Very little water, drought tolerant, low light",
                tips="Perfect for beginners, air purifying",
                frequency="14-21 days",
                problems="Root rot if overwatered",
            ),
        },
    ),
}

GENERIC_PLANT = KnowledgeEntry(
    key="generic",
    sheets={
        "fr": CareSheet(
            name="Plante d'intérieur générique",
            care="Lumière indirecte, arroser quand le sol est sec, éviter les courants d'air",
            tips="Surveillez les feuilles pour détecter les problèmes, fertilisez au printemps",
            frequency="7-10 jours",
            problems="Feuilles jaunes = arrosage excessif, feuilles tombantes = manque d'eau",
        ),
        "en": CareSheet(
            name="Generic houseplant",
            care="Indirect light, water when soil is dry, avoid drafts",
            tips="Watch leaves for problems, fertilize in spring",
            frequency="7-10 days",
            problems="Yellow leaves = overwatering, drooping leaves = underwatering",
        ),
    },
)


def find_plant(query: str) -> KnowledgeEntry:
    """
    First entry whose key appears in the query, or whose name (in any
    language) contains the query; the generic houseplant otherwise.
    """
    query_lower = (query or "").strip().lower()
    if not query_lower:
        return GENERIC_PLANT

    for key, entry in KNOWLEDGE_BASE.items():
        if key in query_lower:
            return entry
        if any(query_lower in sheet.name.lower() for sheet in entry.sheets.values()):
            return entry
    return GENERIC_PLANT
