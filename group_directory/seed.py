import logging

from group_directory.repositories.groups import GroupStore
from group_directory.schemas.group import Category, Country, GroupCreate

log = logging.getLogger("group_directory.seed")

SAMPLE_GROUPS = [
    GroupCreate(
        title="Tech Innovators Hub",
        description=(
            "Connect with tech enthusiasts, share innovations, and discuss "
            "the latest in technology and startups."
        ),
        whatsapp_link="https://chat.whatsapp.com/tech-innovators",
        category=Category.TECHNOLOGY,
        country=Country.US,
        image_url="https://images.unsplash.com/photo-1522071820081-009f0129c71c?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
    ),
    GroupCreate(
        title="Entrepreneurs Network",
        description=(
            "Join successful entrepreneurs, share business ideas, and find "
            "potential partners for your next venture."
        ),
        whatsapp_link="https://chat.whatsapp.com/entrepreneurs-network",
        category=Category.BUSINESS,
        country=Country.IN,
        image_url="https://images.unsplash.com/photo-1600880292203-757bb62b4baf?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
    ),
    GroupCreate(
        title="Medical Students Unite",
        description=(
            "Connect with medical students worldwide, share study materials, "
            "and support each other through the journey."
        ),
        whatsapp_link="https://chat.whatsapp.com/medical-students",
        category=Category.EDUCATION,
        country=Country.UK,
        image_url="https://images.unsplash.com/photo-1523240795612-9a054b0db644?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
    ),
    GroupCreate(
        title="Pro Gamers League",
        description=(
            "Join competitive gamers, discuss strategies, find teammates, and "
            "stay updated with the latest gaming trends."
        ),
        whatsapp_link="https://chat.whatsapp.com/pro-gamers",
        category=Category.GAMING,
        country=Country.CA,
        image_url="https://images.unsplash.com/photo-1542751371-adc38448a05e?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
    ),
]


async def seed_sample_groups(store: GroupStore) -> int:
    """Add the sample groups when the store is empty. Returns how many were added."""
    if await store.list_all():
        return 0
    for group in SAMPLE_GROUPS:
        await store.create(group)
    log.info("Seeded %d sample groups", len(SAMPLE_GROUPS))
    return len(SAMPLE_GROUPS)
