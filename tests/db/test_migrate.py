from app.db.postgres import migrate


def test_alembic_config_points_at_migrations_and_escapes_url():
    cfg = migrate.alembic_config("postgresql://u:p%40ss@db:5432/blog")

    assert cfg.get_main_option("script_location") == str(migrate.MIGRATIONS_DIR)
    assert cfg.get_main_option("sqlalchemy.url") == "postgresql://u:p%40ss@db:5432/blog"
    assert (migrate.MIGRATIONS_DIR / "env.py").exists()


def test_run_migrations_upgrades_to_head(monkeypatch):
    calls = []
    monkeypatch.setattr(
        migrate.command, "upgrade", lambda cfg, rev: calls.append((cfg, rev))
    )

    migrate.run_migrations("postgresql://u:p@db:5432/blog")

    cfg, rev = calls[0]
    assert rev == "head"
    assert cfg.get_main_option("sqlalchemy.url") == "postgresql://u:p@db:5432/blog"
