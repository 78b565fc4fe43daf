"""Shared test fixtures for the business health test suite."""

import pytest

from healthscore.models.business_input import BusinessInputData


def make_input_dict(**overrides) -> dict:
    """Form payload (camelCase wire names) for the reference business.

    Keyword overrides use the same camelCase names.
    """
    data = {
        "totalCustomers": 3200,
        "averageProjectValue": 4500,
        "contactFrequencyPerYear": 1,
        "hasReactivationProcess": False,
        "googleStarRating": 4.2,
        "reviewResponseRate": 22,
        "sharesReviewsOnSocialMedia": False,
        "dailyCalls": 50,
        "callAnswerRate": 68,
        "hasAfterHoursHandling": False,
        "availableChannels": ["phone", "email"],
        "averageResponseTimeHours": 4,
        "monthlyWebsiteVisitors": 5000,
        "conversionRate": 2.8,
        "isMobileOptimized": False,
        "hasAutomatedFollowUp": False,
    }
    data.update(overrides)
    return data


def make_input(**overrides) -> BusinessInputData:
    return BusinessInputData.model_validate(make_input_dict(**overrides))


@pytest.fixture
def reference_input_dict() -> dict:
    return make_input_dict()


@pytest.fixture
def reference_input() -> BusinessInputData:
    """Contractor with 3,200 customers, 4.2 stars and two contact channels."""
    return make_input()


@pytest.fixture
def weak_input() -> BusinessInputData:
    """Minimal performance on every pillar."""
    return make_input(
        contactFrequencyPerYear=0,
        hasReactivationProcess=False,
        googleStarRating=1,
        reviewResponseRate=0,
        sharesReviewsOnSocialMedia=False,
        callAnswerRate=10,
        hasAfterHoursHandling=False,
        availableChannels=["phone"],
        averageResponseTimeHours=48,
        conversionRate=0.5,
        isMobileOptimized=False,
        hasAutomatedFollowUp=False,
    )


@pytest.fixture
def strong_input() -> BusinessInputData:
    """Best-practice performance on every pillar."""
    return make_input(
        contactFrequencyPerYear=12,
        hasReactivationProcess=True,
        googleStarRating=4.8,
        reviewResponseRate=90,
        sharesReviewsOnSocialMedia=True,
        callAnswerRate=95,
        hasAfterHoursHandling=True,
        availableChannels=["phone", "email", "live_chat", "social_media", "sms"],
        averageResponseTimeHours=0.5,
        conversionRate=5.5,
        isMobileOptimized=True,
        hasAutomatedFollowUp=True,
    )
