#!/usr/bin/env python3
"""
Example: Fetch and display OKX account information.

This example demonstrates how to:
1. Create an account API using environment variables
2. Show account balances by currency
3. Retrieve and display open positions
4. Display account configuration, risk and request statistics

Prerequisites:
- Set OKX_API_KEY, OKX_API_SECRET and OKX_PASSPHRASE environment variables
- Install okx-account-client in development mode: pip install -e .

Usage:
    python examples/okx_account_info.py

Environment Variables:
    OKX_API_KEY=your_api_key_here
    OKX_API_SECRET=your_api_secret_here
    OKX_PASSPHRASE=your_passphrase_here
    OKX_SIMULATED=1   # optional, use demo trading
"""

import asyncio
import logging

from okx_client import OkxAccount, OkxError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def print_section_header(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f" {title.upper()} ".center(70, "="))
    print("=" * 70)


def print_balances(balances):
    print_section_header("Balances")
    if not balances:
        print("No balances")
        return

    print(f"{'CCY':<8} {'Balance':>20} {'Available':>20} {'Frozen':>20} {'UPL':>14}")
    for bal in balances:
        print(
            f"{bal.ccy:<8} {bal.balance:>20} {bal.available_balance:>20} "
            f"{bal.frozen_balance:>20} {bal.unrealized_pl or 'N/A':>14}"
        )


def print_positions(positions):
    print_section_header("Open Positions")
    if not positions:
        print("No open positions")
        return

    for pos in positions:
        print(
            f"{pos.inst_id:<20} {pos.pos_side:<6} size={pos.pos:<12} "
            f"avg={pos.avg_px or 'N/A':<12} upl={pos.upl or 'N/A'} lever={pos.lever or 'N/A'}"
        )


async def main():
    try:
        account = OkxAccount.from_env()
    except ValueError as e:
        logger.error(f"Missing configuration: {e}")
        return

    async with account:
        try:
            print_balances(await account.get_balance())
            print_positions(await account.get_positions())

            print_section_header("Configuration")
            for cfg in await account.get_config():
                print(f"Account {cfg.account_id}: level={cfg.level} posMode={cfg.position_mode} "
                      f"autoLoan={cfg.auto_loan}")

            print_section_header("Risk")
            for risk in await account.get_account_risk():
                print(f"Risk level {risk.risk_level}, total equity {risk.total_equity}")
        except OkxError as e:
            logger.error(f"Request failed: {e}")

        stats = account.client.get_statistics()
        print_section_header("Statistics")
        print(f"Requests: {stats.total_requests} (failed {stats.failed_requests}), "
              f"avg {stats.avg_duration_ms:.1f} ms")


if __name__ == "__main__":
    asyncio.run(main())
