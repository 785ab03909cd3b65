"""add destination suggestions catalog

Revision ID: 20250809_01
Revises:
Create Date: 2025-08-09

"""

from __future__ import annotations

import uuid

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID

from alembic import op


# revision identifiers, used by Alembic.
revision = "20250809_01"
down_revision = None
branch_labels = None
depends_on = None


SEED_ROWS = [
    ("Paris", "France", "Europe", "City of Light and Love",
     ["Art", "Culture", "Romance", "Food"], "Apr-Jun, Sep-Oct", 48.8566, 2.3522, 100),
    ("Tokyo", "Japan", "Asia", "Modern Metropolis",
     ["Technology", "Food", "Culture", "Shopping"], "Mar-May, Sep-Nov", 35.6762, 139.6503, 95),
    ("New York", "United States", "North America", "The Big Apple",
     ["Culture", "Broadway", "Food", "Museums"], "Apr-Jun, Sep-Nov", 40.7128, -74.0060, 90),
    ("London", "United Kingdom", "Europe", "Historic Capital",
     ["History", "Museums", "Theater", "Culture"], "May-Sep", 51.5074, -0.1278, 85),
    ("Rome", "Italy", "Europe", "Eternal City",
     ["History", "Architecture", "Food", "Art"], "Apr-Jun, Sep-Oct", 41.9028, 12.4964, 80),
    ("Barcelona", "Spain", "Europe", "Gaudi's Masterpiece",
     ["Architecture", "Beaches", "Nightlife", "Food"], "May-Jun, Sep-Oct", 41.3851, 2.1734, 75),
    ("Bangkok", "Thailand", "Asia", "City of Angels",
     ["Street Food", "Temples", "Nightlife", "Shopping"], "Nov-Mar", 13.7563, 100.5018, 70),
    ("Sydney", "Australia", "Oceania", "Harbour City",
     ["Opera House", "Beaches", "Culture", "Nature"], "Sep-Nov, Mar-May", -33.8688, 151.2093, 65),
    ("Dubai", "United Arab Emirates", "Asia", "City of Gold",
     ["Luxury", "Shopping", "Architecture", "Desert"], "Nov-Mar", 25.2048, 55.2708, 60),
    ("Singapore", "Singapore", "Asia", "Garden City",
     ["Food", "Shopping", "Architecture", "Gardens"], "Feb-Apr", 1.3521, 103.8198, 55),
]  # fmt: skip


def upgrade() -> None:
    table = op.create_table(
        "destination_suggestions",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("country", sa.String(200), nullable=False),
        sa.Column("continent", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "popular_for",
            JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("best_time", sa.String(100), nullable=True),
        sa.Column("coordinates", JSONB(), nullable=True),
        sa.Column(
            "popularity_score", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )

    op.create_index(
        "ix_destination_suggestions_name", "destination_suggestions", ["name"]
    )
    op.create_index(
        "ix_destination_suggestions_popularity_score",
        "destination_suggestions",
        ["popularity_score"],
    )

    op.bulk_insert(
        table,
        [
            {
                "id": uuid.uuid4(),
                "name": name,
                "country": country,
                "continent": continent,
                "description": description,
                "popular_for": popular_for,
                "best_time": best_time,
                "coordinates": {"lat": lat, "lng": lng},
                "popularity_score": score,
            }
            for (
                name,
                country,
                continent,
                description,
                popular_for,
                best_time,
                lat,
                lng,
                score,
            ) in SEED_ROWS
        ],
    )


def downgrade() -> None:
    op.drop_index("ix_destination_suggestions_popularity_score")
    op.drop_index("ix_destination_suggestions_name")
    op.drop_table("destination_suggestions")
