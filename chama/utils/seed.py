import logging
from datetime import date

from sqlmodel import Session, select

from chama.core.security import get_password_hash
from chama.models.admin import Admin
from chama.models.faq import Faq
from chama.models.group_settings import GroupSettings
from chama.models.member import Member

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "id": "settings_01",
    "target_amount": 500000,
    "target_period_months": 6,
    "daily_minimum": 50,
    "global_interest_rate": 5,
    "require_password_for_sensitive_actions": False,
}

DEFAULT_ADMIN = {
    "id": "admin_01",
    "name": "Admin User",
    "email": "admin@example.com",
    "phone": "+254700000000",
    "password": "admin123",
}

SAMPLE_MEMBERS = [
    {"id": "m_01", "name": "Jane Doe", "phone": "+254712345678", "email": "jane@example.com",
     "joined_at": date(2025, 11, 1), "reason": "School fees", "total_saved": 12300, "outstanding": 500},
    {"id": "m_02", "name": "John Smith", "phone": "+254723456789", "email": "john@example.com",
     "joined_at": date(2025, 10, 15), "reason": "Business capital", "total_saved": 8500, "outstanding": 0},
    {"id": "m_03", "name": "Mary Johnson", "phone": "+254734567890", "email": "mary@example.com",
     "joined_at": date(2025, 9, 20), "reason": "Emergency fund", "total_saved": 15200, "outstanding": 1000},
]

SAMPLE_FAQS = [
    {"id": "faq_01", "question": "How do I make a daily deposit?",
     "answer": "Navigate to the Funds page, select your name from the dropdown, enter the amount, "
               "and click the Deposit button."},
    {"id": "faq_02", "question": "What is the minimum daily saving amount?",
     "answer": "The minimum daily saving amount is KES 50 per day as set by the admin."},
]


def seed_store(session: Session) -> bool:
    """Loads the sample data into an empty store. Returns False if it was not empty."""
    if session.exec(select(GroupSettings)).first() or session.exec(select(Member)).first():
        return False

    session.add(GroupSettings(**DEFAULT_SETTINGS))

    admin = dict(DEFAULT_ADMIN)
    session.add(Admin(hashed_password=get_password_hash(admin.pop("password")), **admin))

    for member in SAMPLE_MEMBERS:
        session.add(Member(**member))
    for faq in SAMPLE_FAQS:
        session.add(Faq(**faq))

    session.commit()
    logger.info("Seeded store with %d members and %d FAQs", len(SAMPLE_MEMBERS), len(SAMPLE_FAQS))
    return True
