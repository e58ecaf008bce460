"""
Request-scoped access to the service objects built in main.create_app().
Override these in tests with app.dependency_overrides.
"""

from fastapi import Request

from .config import Settings
from .jobs import JobBuilder
from .pricing_engine import PricingEngine


def get_pricing_engine(request: Request) -> PricingEngine:
    return request.app.state.pricing_engine


def get_job_builder(request: Request) -> JobBuilder:
    return request.app.state.job_builder


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
