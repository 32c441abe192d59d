"""Telegram update handlers.

Handlers translate domain errors into replies; nothing raised by a scan
or a partner stats lookup escapes to python-telegram-bot.
"""

import structlog
from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from solreclaim.bot import messages
from solreclaim.bot.context import get_services
from solreclaim.core.exceptions import (
    ChainQueryError,
    InvalidAddressError,
    PartnerApiError,
    PartnerNotFoundError,
    ReferralCodeMissingError,
)
from solreclaim.core.wallet.validator import validate_address

log = structlog.get_logger(__name__)


async def handle_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/start: warm the price cache and show the menu."""
    services = get_services(context)
    await services.price_cache.get_price()
    await update.effective_message.reply_text(
        messages.welcome(services.settings.channel_name),
        reply_markup=messages.main_keyboard(),
    )


async def handle_check_wallet(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Menu button: wait for an address."""
    if update.effective_user is None:
        return
    services = get_services(context)
    services.sessions.begin_scan(update.effective_user.id)
    await update.effective_message.reply_text(messages.ASK_ADDRESS)


async def handle_claim(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Menu button: link to the claim platform."""
    services = get_services(context)
    await update.effective_message.reply_text(
        messages.CLAIM_PROMPT,
        reply_markup=messages.claim_keyboard(services.settings.partner_referral_link),
    )


async def handle_partner_stats(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/partner_stats: referral statistics, privileged user only."""
    if update.effective_user is None:
        return
    services = get_services(context)
    message = update.effective_message
    user_id = update.effective_user.id

    if str(user_id) != services.settings.partner_telegram_id:
        log.info("partner_stats_denied", user_id=user_id)
        await message.reply_text(messages.ADMIN_ONLY)
        return

    try:
        stats = await services.partner_client.get_configured_stats()
    except ReferralCodeMissingError:
        log.warning("partner_stats_no_referral_code")
        await message.reply_text(messages.REFERRAL_CODE_MISSING)
        return
    except PartnerNotFoundError:
        await message.reply_text(messages.REFERRAL_CODE_INVALID)
        return
    except PartnerApiError as e:
        log.error("partner_stats_failed", error=str(e))
        await message.reply_text(messages.PARTNER_STATS_FAILED)
        return

    await message.reply_text(messages.partner_dashboard(stats))


async def handle_text(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Any other text: an address if one was requested, else a hint."""
    if update.effective_user is None:
        return
    services = get_services(context)
    message = update.effective_message
    user_id = update.effective_user.id

    # State is cleared before validation so a retry goes through the menu
    if not services.sessions.consume(user_id):
        await message.reply_text(messages.USE_BUTTONS, reply_markup=messages.main_keyboard())
        return

    try:
        owner = validate_address(message.text)
    except InvalidAddressError as e:
        log.info("wallet_address_rejected", user_id=user_id, reason=str(e))
        await message.reply_text(messages.INVALID_ADDRESS)
        return

    await message.reply_text(messages.CHECKING)

    try:
        outcome = await services.scanner.scan(owner)
    except ChainQueryError as e:
        log.error("wallet_scan_failed", user_id=user_id, error=str(e))
        await message.reply_text(messages.CHAIN_ERROR)
        return

    if outcome.estimate is None:
        await message.reply_text(messages.WALLET_CLEAN)
        return

    await message.reply_text(
        messages.scan_result(outcome.estimate),
        parse_mode=ParseMode.MARKDOWN,
        reply_markup=messages.claim_keyboard(
            services.settings.partner_referral_link, label="🔗 Claim Now"
        ),
    )


async def handle_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log errors not handled above."""
    log.error(
        "update_handling_failed",
        update_type=type(update).__name__,
        error=str(context.error),
        error_type=type(context.error).__name__,
    )
