"""Tests for the withdrawal orchestrator."""

import re

import httpx
import pytest

from app.engine.orchestrator import process_withdrawal
from app.models.enums import FailureKind, PaymentGateway, WithdrawalStatus
from app.models.withdrawal import WithdrawalRequest
from app.providers.flutterwave_provider import FlutterwaveProvider
from app.routing.gateway_selector import GatewayRegistry

from tests.fakes import FailingProvider, RaisingNotifier, RecordingNotifier, RecordingProvider


def _bank(**overrides) -> WithdrawalRequest:
    fields = {
        "amount": 1000,
        "withdrawalMethod": "bank",
        "paymentMethod": "stripe",
        "accountName": "John Doe",
        "accountNumber": "1234567890",
    }
    fields.update(overrides)
    return WithdrawalRequest.model_validate(fields)


def _mpesa(**overrides) -> WithdrawalRequest:
    fields = {
        "amount": 500,
        "withdrawalMethod": "mpesa",
        "accountName": "Jane Wanjiku",
        "phoneNumber": "0712345678",
    }
    fields.update(overrides)
    return WithdrawalRequest.model_validate(fields)


@pytest.mark.asyncio
async def test_stripe_bank_withdrawal(gateways, notifier, stripe_provider, flutterwave_provider):
    result = await process_withdrawal(_bank(), gateways, notifier)

    assert result.success is True
    assert result.fees == 50
    assert result.net_amount == 950
    assert result.gateway == PaymentGateway.STRIPE
    assert result.status == WithdrawalStatus.PROCESSING
    assert result.estimated_completion == "Instant to 24 hours"
    assert result.message == "Withdrawal of KES 1000 processed successfully"
    assert result.payment_details["gateway"] == "stripe"
    assert result.payment_details["clientSecret"] == "pi_secret_test"

    assert len(stripe_provider.calls) == 1
    assert flutterwave_provider.calls == []

    amount, recipient, transaction_id = stripe_provider.calls[0]
    assert amount == 1000
    assert recipient.account_name == "John Doe"
    assert transaction_id == result.transaction_id


@pytest.mark.asyncio
async def test_identifier_formats(gateways, notifier):
    result = await process_withdrawal(_bank(), gateways, notifier)

    assert re.fullmatch(r"TXN_\d{13}_[0-9A-Z]{9}", result.transaction_id)
    assert re.fullmatch(r"REF_\d{13}", result.reference)


@pytest.mark.asyncio
async def test_mpesa_defaults_to_flutterwave(gateways, notifier, stripe_provider, flutterwave_provider):
    result = await process_withdrawal(_mpesa(), gateways, notifier)

    assert result.success is True
    assert result.fees == 25
    assert result.net_amount == 475
    assert result.gateway == PaymentGateway.FLUTTERWAVE
    assert result.payment_details["transferId"] == "flutterwave_1"
    assert result.payment_details["reference"] == result.transaction_id
    assert stripe_provider.calls == []
    assert len(flutterwave_provider.calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("payment_method", [None, "flutterwave", "paypal", "Stripe"])
async def test_non_stripe_routes_to_transfer_network(
    payment_method, gateways, notifier, stripe_provider, flutterwave_provider
):
    await process_withdrawal(_bank(paymentMethod=payment_method), gateways, notifier)

    assert stripe_provider.calls == []
    assert len(flutterwave_provider.calls) == 1


@pytest.mark.asyncio
async def test_transaction_ids_are_not_reused(gateways, notifier):
    first = await process_withdrawal(_bank(), gateways, notifier)
    second = await process_withdrawal(_bank(), gateways, notifier)

    assert first.transaction_id != second.transaction_id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "amount, shown",
    [(1000, "1000"), (1000.0, "1000"), (1234.5, "1234.5"), (100.005, "100.005")],
)
async def test_message_shows_amount_unrounded(amount, shown, gateways, notifier):
    result = await process_withdrawal(_bank(amount=amount), gateways, notifier)

    assert result.message == f"Withdrawal of KES {shown} processed successfully"
    assert notifier.events[0].amount == amount


class TestValidationFailures:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, 50, 99])
    async def test_low_amount_never_reaches_provider(
        self, amount, gateways, notifier, stripe_provider, flutterwave_provider
    ):
        result = await process_withdrawal(_bank(amount=amount), gateways, notifier)

        assert result.success is False
        assert result.failure == FailureKind.VALIDATION
        assert "at least KES 100" in result.message
        assert result.transaction_id is None
        assert stripe_provider.calls == [] and flutterwave_provider.calls == []
        assert notifier.events == []

    @pytest.mark.asyncio
    async def test_high_amount(self, gateways, notifier):
        result = await process_withdrawal(_bank(amount=2_000_000), gateways, notifier)

        assert result.success is False
        assert "1,000,000" in result.message

    @pytest.mark.asyncio
    async def test_bad_phone_number(self, gateways, notifier):
        result = await process_withdrawal(_mpesa(phoneNumber="12345"), gateways, notifier)

        assert result.success is False
        assert "10-digit" in result.message


class TestProviderFailure:
    @pytest.mark.asyncio
    async def test_failure_is_terminal_and_silent(self, notifier, flutterwave_provider):
        failing = FailingProvider(PaymentGateway.STRIPE, message="Stripe error: card_declined")
        gateways = GatewayRegistry.of(failing, flutterwave_provider)

        result = await process_withdrawal(_bank(), gateways, notifier)

        assert result.success is False
        assert result.failure == FailureKind.PROVIDER
        assert result.message == "Payment processing failed: Stripe error: card_declined"
        assert result.transaction_id is None
        # No fallback to the other gateway, no notification
        assert flutterwave_provider.calls == []
        assert notifier.events == []

    @pytest.mark.asyncio
    async def test_each_attempt_gets_a_fresh_transaction_id(self, notifier, stripe_provider):
        failing = FailingProvider(PaymentGateway.FLUTTERWAVE)
        gateways = GatewayRegistry.of(stripe_provider, failing)

        await process_withdrawal(_mpesa(), gateways, notifier)
        await process_withdrawal(_mpesa(), gateways, notifier)

        issued = [call[2] for call in failing.calls]
        assert len(issued) == 2
        assert issued[0] != issued[1]

    @pytest.mark.asyncio
    async def test_transfer_error_envelope_is_a_provider_failure(self, notifier, stripe_provider):
        def handler(request):
            return httpx.Response(200, json={"status": "error", "message": "Insufficient balance", "data": None})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            flutterwave = FlutterwaveProvider(client, secret_key="FLWSECK_TEST", api_base="https://flw.test")
            gateways = GatewayRegistry.of(stripe_provider, flutterwave)

            result = await process_withdrawal(_mpesa(), gateways, notifier)

        assert result.success is False
        assert result.failure == FailureKind.PROVIDER
        assert result.message == "Payment processing failed: Flutterwave processing failed"
        assert notifier.events == []

    @pytest.mark.asyncio
    async def test_unexpected_adapter_error_propagates(self, notifier, flutterwave_provider):
        class BrokenProvider(RecordingProvider):
            async def process(self, amount, recipient, transaction_id):
                raise KeyError("boom")

        gateways = GatewayRegistry.of(BrokenProvider(PaymentGateway.STRIPE), flutterwave_provider)

        with pytest.raises(KeyError):
            await process_withdrawal(_bank(), gateways, notifier)


class TestNotification:
    @pytest.mark.asyncio
    async def test_event_published_on_success(self, gateways, notifier):
        result = await process_withdrawal(_bank(), gateways, notifier)

        assert len(notifier.events) == 1
        event = notifier.events[0]
        assert event.transaction_id == result.transaction_id
        assert event.reference == result.reference
        assert event.amount == 1000
        assert event.method == "bank"
        assert event.account_name == "John Doe"
        assert event.status == "processing"
        assert event.timestamp

    @pytest.mark.asyncio
    async def test_notifier_failure_does_not_change_result(self, gateways):
        notifier = RaisingNotifier()

        result = await process_withdrawal(_bank(), gateways, notifier)

        assert notifier.calls == 1
        assert result.success is True
        assert result.fees == 50
        assert result.net_amount == 950

    @pytest.mark.asyncio
    async def test_notifier_error_result_is_ignored(self, gateways):
        from app.engine.errors import NotificationError
        from app.notifications.base import NotificationResult

        class RejectingNotifier(RecordingNotifier):
            async def notify(self, event):
                self.events.append(event)
                return NotificationResult(delivered=False, error=NotificationError("quota exceeded"))

        notifier = RejectingNotifier()
        result = await process_withdrawal(_mpesa(), gateways, notifier)

        assert len(notifier.events) == 1
        assert result.success is True
