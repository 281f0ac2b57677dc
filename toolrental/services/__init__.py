"""Domain services for the tool rental service."""

from toolrental.services.overlap_detector import OverlapDetector
from toolrental.services.payment_capture import PaymentCaptureOrchestrator
from toolrental.services.payment_service import PaymentService
from toolrental.services.paypal_client import PayPalClient
from toolrental.services.rent_service import RentService
from toolrental.services.rental_state_machine import RentalStateMachine

__all__ = [
    "OverlapDetector",
    "PaymentCaptureOrchestrator",
    "PaymentService",
    "PayPalClient",
    "RentService",
    "RentalStateMachine",
]
