from __future__ import annotations

import unittest
from pathlib import Path

from app.infrastructure.db.ids import parse_uuid
from app.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from app.infrastructure.db.repositories.profile_repository import SqlProfileRepository


REPOSITORIES = Path("app/infrastructure/db/repositories")


def _source(name: str) -> str:
    return (REPOSITORIES / name).read_text(encoding="utf-8")


class AccountsRepositorySqlTests(unittest.TestCase):
    def test_plan_state_is_written_in_one_statement(self):
        source = _source("accounts_repository.py")
        self.assertIn("SET plan_type = :plan_type,\n                pro_expires_at = :pro_expires_at,", source)
        self.assertIn("RETURNING {USER_COLUMNS}", source)

    def test_admin_stats_count_effective_tier(self):
        source = _source("accounts_repository.py")
        self.assertIn("AND (pro_expires_at IS NULL OR pro_expires_at > :now)", source)
        self.assertIn("(SELECT count(*) FROM public.links WHERE deleted_at IS NULL) AS total_links", source)

    def test_user_search_matches_email_or_name(self):
        source = _source("accounts_repository.py")
        self.assertIn("u.email ILIKE :pattern OR u.name ILIKE :pattern", source)


class ProfileRepositorySqlTests(unittest.TestCase):
    def test_new_link_goes_to_end_of_active_links(self):
        source = _source("profile_repository.py")
        self.assertIn('COALESCE(MAX("order"), -1) + 1', source)

    def test_soft_delete_also_disables_link(self):
        source = _source("profile_repository.py")
        self.assertIn("SET deleted_at = :deleted_at,\n                is_enabled = false", source)

    def test_updates_reject_unknown_columns_before_touching_database(self):
        repository = SqlProfileRepository(engine=None)

        with self.assertRaises(ValueError):
            repository.update_link(link_id="link-1", changes={"profile_page_id": "other"})
        with self.assertRaises(ValueError):
            repository.update_link(link_id="link-1", changes={})


class MalformedIdTests(unittest.TestCase):
    def test_parse_uuid_normalizes_or_rejects(self):
        self.assertEqual(
            parse_uuid("6F9619FF-8B86-D011-B42D-00C04FC964FF"),
            "6f9619ff-8b86-d011-b42d-00c04fc964ff",
        )
        self.assertIsNone(parse_uuid("abc"))
        self.assertIsNone(parse_uuid(""))
        self.assertIsNone(parse_uuid(None))

    def test_lookups_by_malformed_id_find_nothing_without_querying(self):
        accounts = SqlAccountsRepository(engine=None)
        profiles = SqlProfileRepository(engine=None)

        self.assertIsNone(accounts.get_user_by_id(user_id="abc"))
        self.assertIsNone(accounts.update_plan_state(user_id="abc", plan_state=None, now=None))
        self.assertIsNone(profiles.get_link(link_id="not-a-uuid"))


class AnalyticsRepositorySqlTests(unittest.TestCase):
    def test_clicks_report_deleted_links(self):
        source = _source("analytics_repository.py")
        self.assertIn("LEFT JOIN public.links l ON l.id = c.link_id", source)
        self.assertIn("l.deleted_at AS link_deleted_at", source)


if __name__ == "__main__":
    unittest.main()
