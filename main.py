import logging

import hydra
from omegaconf import DictConfig

from fabrica.client import exercise_devices, render_login_form
from fabrica.core.errors import FabricaError
from fabrica.devices import get_device_factory
from fabrica.notifications import create_notifier, notify_users
from fabrica.query import create_query_builder
from fabrica.shared import build_shared_context, get_shared_instance
from fabrica.themes import create_component_factory
from fabrica.utils.logging_utils import get_logger


def build_query(cfg_query, log_level=logging.INFO):
    builder = create_query_builder(cfg_query.get("dialect"), log_level=log_level)
    builder.table(cfg_query.get("table"))
    if cfg_query.get("columns"):
        builder.select(list(cfg_query.columns))
    if cfg_query.get("where"):
        where = cfg_query.where
        builder.where(where.column, where.value, where.get("operator", "="))
    for order in cfg_query.get("order_by") or []:
        builder.order_by(order.column, order.get("descending", False))
    if cfg_query.get("limit") is not None:
        builder.limit(cfg_query.limit)
    return builder.finalize()


def run(cfg: DictConfig) -> dict:
    log_level = logging.getLevelName(str(cfg.logging.level).upper())
    logger = get_logger("fabrica", log_level)

    form = render_login_form(create_component_factory(cfg.theme))
    devices = exercise_devices(get_device_factory(cfg.devices))
    query = build_query(cfg.query, log_level=log_level)

    notifier = create_notifier(cfg.notifier, log_level=log_level)
    sent = notify_users(notifier, list(cfg.run.recipients), cfg.run.message)

    context = build_shared_context(cfg.database, log_level=log_level)
    try:
        connection_info = get_shared_instance(context).connection_info()
    except FabricaError as exc:
        logger.error("Shared database unavailable: %s", exc)
        connection_info = None

    logger.info("Rendered %s form, %s query: %s", cfg.theme.name, query.dialect, query.render())
    return {
        "form": form,
        "devices": devices,
        "query": query.render(),
        "notified": sent,
        "connection": connection_info,
    }


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    results = run(cfg)
    print(results["form"])
    print(results["query"])


if __name__ == "__main__":
    main()
