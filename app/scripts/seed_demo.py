"""
Seed Demo Data Script
Populates industries, a demo client, its profiles, a 360 group with a manager,
and industry benchmarks from app/config/demo_data.py.
Safe to re-run: every step looks up or upserts before writing.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from app.config.demo_data import DEMO_DATA
from app.core.crud import TableQueries
from app.core.query import Filter
from app.database.supabase_client import SupabaseClient
from app.modules.clients.schemas import ClientResponse
from app.modules.groups.schemas import GroupResponse
from app.modules.industries.schemas import IndustryResponse
from app.modules.relationships.service import RelationshipService
from app.modules.users.schemas import UserResponse
from supabase import Client
from typing import Dict
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def find_or_create(queries: TableQueries, match: Dict[str, str], fields: Dict) -> Dict:
    """Update the row matching every column in `match`, or insert it"""
    filters = [Filter(column=column, value=value) for column, value in match.items()]
    existing = queries.select_all(filters=filters).unwrap()
    if existing:
        row = queries.update(existing[0].id, fields).unwrap()
        logger.debug(f"Updated {queries.table}: {match}")
    else:
        row = queries.insert({**match, **fields}).unwrap()
        logger.debug(f"Created {queries.table}: {match}")
    return row


def seed_industries(supabase: Client) -> Dict[str, str]:
    """Seed industries, returning name -> id"""
    logger.info("Seeding industries...")
    queries = TableQueries(supabase, "industries", IndustryResponse, label="Industry")
    industry_ids = {}
    for name in DEMO_DATA["industries"]:
        industry = find_or_create(queries, {"name": name}, {})
        industry_ids[name] = industry.id
    logger.info(f"Industries seeded: {len(industry_ids)}")
    return industry_ids


def seed_client(supabase: Client) -> str:
    logger.info("Seeding demo client...")
    queries = TableQueries(supabase, "clients", ClientResponse, label="Client")
    client_data = dict(DEMO_DATA["client"])
    name = client_data.pop("name")
    return find_or_create(queries, {"name": name}, client_data).id


def seed_profiles(supabase: Client, client_id: str, industry_ids: Dict[str, str]) -> Dict[str, str]:
    """Upsert demo profiles on email, returning email -> profile id"""
    logger.info("Seeding demo profiles...")
    queries = TableQueries(supabase, "profiles", UserResponse, label="User")
    profile_ids = {}
    for profile in DEMO_DATA["profiles"]:
        row = queries.upsert({
            "username": profile["username"],
            "name": profile["name"],
            "email": profile["email"],
            "client_id": client_id,
            "industry_id": industry_ids.get(profile["industry"])
        }, on_conflict="email").unwrap()
        profile_ids[profile["email"]] = row.id
    logger.info(f"Profiles seeded: {len(profile_ids)}")
    return profile_ids


def seed_group(supabase: Client, client_id: str, profile_ids: Dict[str, str]) -> str:
    logger.info("Seeding demo group...")
    group_data = DEMO_DATA["group"]
    queries = TableQueries(supabase, "groups", GroupResponse, label="Group")
    group = queries.upsert({
        "client_id": client_id,
        "name": group_data["name"],
        "description": group_data["description"],
        "target_id": profile_ids[group_data["target"]]
    }, on_conflict="client_id,name").unwrap()

    relationships = RelationshipService(supabase)
    added = 0
    for member in group_data["members"]:
        user_id = profile_ids[member["email"]]
        if relationships.get_membership(group.id, user_id).unwrap() is None:
            relationships.assign_user_to_group(group.id, user_id, member["position"]).unwrap()
            added += 1

    relationships.assign_manager_to_group(
        group.id, profile_ids[group_data["manager"]], position="Manager"
    ).unwrap()
    logger.info(f"Group seeded: {added} members added, manager assigned")
    return group.id


def seed_benchmarks(supabase: Client, industry_ids: Dict[str, str]) -> int:
    """Upsert benchmarks for dimensions that already exist; missing dimensions are skipped"""
    logger.info("Seeding benchmarks...")
    benchmark_data = DEMO_DATA["benchmarks"]
    industry_id = industry_ids[benchmark_data["industry"]]
    names = list(benchmark_data["values"].keys())

    dimensions = supabase.table("dimensions")\
        .select("id, name")\
        .in_("name", names)\
        .execute()

    if not dimensions.data:
        logger.warning("No matching dimensions found; load an assessment before seeding benchmarks")
        return 0

    queries = TableQueries(supabase, "benchmarks", label="Benchmark")
    count = 0
    for dimension in dimensions.data:
        queries.upsert({
            "dimension_id": dimension["id"],
            "industry_id": industry_id,
            "value": benchmark_data["values"][dimension["name"]]
        }, on_conflict="dimension_id,industry_id").unwrap()
        count += 1
    logger.info(f"Benchmarks seeded: {count}")
    return count


def migrate_manager_roles(supabase: Client) -> int:
    """Promote rows still carrying the legacy 'leader' role to 'manager'"""
    migrated = RelationshipService(supabase).migrate_legacy_manager_roles().unwrap()
    if migrated:
        logger.info(f"Migrated {len(migrated)} legacy leader memberships to manager")
    return len(migrated)


def main():
    """Main function to seed the demo dataset"""
    try:
        supabase = SupabaseClient.get_service_client()

        logger.info("Starting demo data seeding...")

        industry_ids = seed_industries(supabase)
        client_id = seed_client(supabase)
        profile_ids = seed_profiles(supabase, client_id, industry_ids)
        seed_group(supabase, client_id, profile_ids)
        migrate_manager_roles(supabase)
        benchmark_count = seed_benchmarks(supabase, industry_ids)

        logger.info("Seeding completed successfully!")
        logger.info(f"Total: {len(industry_ids)} industries, {len(profile_ids)} profiles, {benchmark_count} benchmarks")

    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
