# api/deps.py
from fastapi import Request

from core.interfaces import TrafficProvider
from services.progress import ProgressTracker
from services.scoring import ScoringEngine
from services.subsidy import SubsidyCalculator

# Everything below is built once in main.lifespan and parked on app.state


def get_tracker(request: Request) -> ProgressTracker:
    return request.app.state.tracker


def get_scoring_engine(request: Request) -> ScoringEngine:
    return request.app.state.scoring


def get_subsidy_calculator(request: Request) -> SubsidyCalculator:
    return request.app.state.subsidy


def get_traffic_provider(request: Request) -> TrafficProvider:
    return request.app.state.traffic
