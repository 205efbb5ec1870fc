"""Services package."""

from laptop_helpdesk.services.data_loader import DataLoader
from laptop_helpdesk.services.helpdesk_service import HelpdeskService, helpdesk_service
from laptop_helpdesk.services.intake import OrderIntakeMachine
from laptop_helpdesk.services.recommendation import RecommendationService
from laptop_helpdesk.services.scoring import ScoringEngine

__all__ = [
    "DataLoader",
    "HelpdeskService",
    "helpdesk_service",
    "OrderIntakeMachine",
    "RecommendationService",
    "ScoringEngine",
]
