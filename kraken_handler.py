import logging

from kraken_futures import CfRestApiV3

logger = logging.getLogger(__name__)


def handle_kraken_request(client: CfRestApiV3, data: dict):
    """Run one webhook action against the client and return its result."""
    action = data.get('action')
    handler = ACTIONS.get(action)
    if handler is None:
        raise ValueError(f"Invalid action for Kraken Futures: {action}")

    logger.info("Kraken Futures action: %s", action)
    return handler(client, data)


def create_order(client: CfRestApiV3, data: dict):
    return client.send_order(
        order_type=data['order_type'],
        symbol=data['symbol'],
        side=data['side'],
        size=data['size'],
        limit_price=data.get('limit_price'),
        stop_price=data.get('stop_price'),
        client_order_id=data.get('cli_ord_id')
    )


def edit_order(client: CfRestApiV3, data: dict):
    return client.edit_order(data['edit'])


def cancel_order(client: CfRestApiV3, data: dict):
    return client.cancel_order(order_id=data.get('order_id'), cli_ord_id=data.get('cli_ord_id'))


def cancel_all_orders(client: CfRestApiV3, data: dict):
    return client.cancel_all_orders(symbol=data.get('symbol'))


def cancel_all_orders_after(client: CfRestApiV3, data: dict):
    return client.cancel_all_orders_after(timeout=data.get('timeout'))


def batch_order(client: CfRestApiV3, data: dict):
    return client.batch_order(data['batch'])


ACTIONS = {
    'create_order': create_order,
    'edit_order': edit_order,
    'cancel_order': cancel_order,
    'cancel_all_orders': cancel_all_orders,
    'cancel_all_orders_after': cancel_all_orders_after,
    'batch_order': batch_order,
}
