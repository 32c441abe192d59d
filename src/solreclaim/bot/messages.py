"""User-facing message text and keyboards."""

from telegram import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
)

from solreclaim.models.partner import PartnerStats
from solreclaim.models.reclaim import ReclaimEstimate

CHECK_WALLET_BUTTON = "🔎 Check Wallet"
CLAIM_BUTTON = "🔗 Claim SOL"

ASK_ADDRESS = "Please send me your Solana wallet address to check."
INVALID_ADDRESS = (
    "🚫 The wallet address you provided is invalid. "
    "Please double-check it and try again."
)
CHECKING = "🔍 Checking Solana wallet... this may take a few moments."
WALLET_CLEAN = "✅ Your wallet is clean! We found no empty accounts to close."
CHAIN_ERROR = (
    "An error occurred while connecting to the Solana network. Please try again later."
)
CLAIM_PROMPT = "To securely reclaim your funds, please proceed to our official platform:"
USE_BUTTONS = "Please use the buttons below to interact with the bot."

ADMIN_ONLY = "🚫 This command is reserved for the channel owner."
REFERRAL_CODE_MISSING = (
    "⚠️ Could not extract a referral code from the configured referral link."
)
REFERRAL_CODE_INVALID = (
    "⚠️ Partner not found. The configured referral code is probably invalid."
)
PARTNER_STATS_FAILED = "⚠️ Could not load partner statistics. Please try again later."


def main_keyboard() -> ReplyKeyboardMarkup:
    """Persistent menu shown under the chat input."""
    return ReplyKeyboardMarkup(
        [[KeyboardButton(CHECK_WALLET_BUTTON)], [KeyboardButton(CLAIM_BUTTON)]],
        resize_keyboard=True,
    )


def claim_keyboard(referral_link: str, label: str = "🔒 Reclaim Your SOL") -> InlineKeyboardMarkup:
    """Single URL button pointing at the claim platform."""
    return InlineKeyboardMarkup([[InlineKeyboardButton(label, url=referral_link)]])


def welcome(channel_name: str) -> str:
    return (
        f"👋 Welcome to the {channel_name} Solana Wallet Checker!\n\n"
        "Find out how much SOL is locked as rent in your empty token accounts."
    )


def scan_result(estimate: ReclaimEstimate) -> str:
    """Markdown summary of a non-empty scan.

    The platform fee is already deducted from the amounts shown.
    """
    return (
        "✅ Scan Complete!\n\n"
        f"📊 We found *{estimate.empty_account_count}* empty token accounts.\n\n"
        "You will receive:\n"
        f"💰 *~{estimate.net_sol_display} SOL*\n"
        f"💵 _Equivalent to ~${estimate.net_usd_display}_"
    )


def partner_dashboard(stats: PartnerStats) -> str:
    return (
        "📊 Partnership Dashboard:\n\n"
        f"👥 Total Users Referred: {stats.user_count}\n"
        f"🔄 Total Transactions: {stats.transaction_count}\n"
        f"💰 Total Earnings: {stats.total_earnings_sol} SOL"
    )
