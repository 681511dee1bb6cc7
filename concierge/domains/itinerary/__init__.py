"""
Travel Concierge - Itinerary Domain
Travel intent, structured plans, plan synthesis and weather lookup.

Import submodules directly, e.g.
``from concierge.domains.itinerary.services import PlanSynthesizer``.
"""
