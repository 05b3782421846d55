"""Shared four-stage call pipeline.

Every public operation runs the same sequence: encode (when a payload is
sent), dispatch, classify, then decode or record the error. Each stage
converts its own faults into the envelope; the first fault ends the call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from packages.typed_rest.codec import Codec, decode_many, decode_one
from packages.typed_rest.envelope import Cardinality, EnvelopeBuilder, RestResult
from packages.typed_rest.errors import ErrorDetail, Stage, StatusRejected, exception_to_error
from packages.typed_rest.http import Outcome, Transport, Verb, classify
from packages.typed_rest.logging import fields, get_logger, log_context

logger = get_logger(__name__)


@dataclass(frozen=True)
class CallSpec:
    """Everything the pipeline needs to run one call."""

    verb: Verb
    url: str
    cardinality: Cardinality
    shape: Any = None
    payload: Any = None
    sends_payload: bool = False


async def execute(
    *,
    transport: Transport,
    codec: Codec,
    call: CallSpec,
) -> RestResult[Any]:
    """Run one call through all stages and return its frozen envelope."""
    builder: EnvelopeBuilder[Any] = EnvelopeBuilder(
        method=call.verb.value,
        url=call.url,
        cardinality=call.cardinality,
    )
    with log_context(
        {
            fields.CALL_ID: builder.call_id,
            fields.HTTP_METHOD: call.verb.value,
            fields.URL: call.url,
            fields.CARDINALITY: call.cardinality.value,
        }
    ):
        await _run_stages(transport=transport, codec=codec, call=call, builder=builder)
        result = builder.build()
        _log_completion(result)
    return result


async def _run_stages(
    *,
    transport: Transport,
    codec: Codec,
    call: CallSpec,
    builder: EnvelopeBuilder[Any],
) -> None:
    method = call.verb.value

    body: bytes | None = None
    if call.sends_payload:
        try:
            body = codec.encode(call.payload)
        except Exception as exc:
            builder.fail(_error(exc, Stage.ENCODE, call))
            return

    with log_context({fields.EVENT: fields.CALL_DISPATCH_EVENT}):
        logger.debug("REST call dispatch")
    try:
        response = await transport.send(method, call.url, body)
    except Exception as exc:
        builder.fail(_error(exc, Stage.TRANSPORT, call))
        return
    builder.record_response(response)

    if classify(call.verb, response.status_code) == Outcome.REJECTED:
        rejected = StatusRejected(
            message=f"HTTP {response.status_code} for {method} {call.url}",
            method=method,
            url=call.url,
            status_code=response.status_code,
        )
        builder.fail(_error(rejected, Stage.CLASSIFY, call))
        return

    if call.cardinality == Cardinality.NONE:
        builder.succeed_empty()
        return

    try:
        if call.cardinality == Cardinality.MANY:
            values = decode_many(codec, response.body, call.shape)
        else:
            value = decode_one(codec, response.body, call.shape)
    except Exception as exc:
        builder.fail(_error(exc, Stage.DECODE, call))
        return

    if call.cardinality == Cardinality.MANY:
        builder.succeed_many(values)
    else:
        builder.succeed_one(value)


def _error(exc: Exception, stage: Stage, call: CallSpec) -> ErrorDetail:
    return exception_to_error(exc, stage=stage, method=call.verb.value, url=call.url)


def _log_completion(result: RestResult[Any]) -> None:
    """Emit one structured completion line for a finished call."""
    payload: dict[str, object] = {
        fields.EVENT: fields.CALL_COMPLETION_EVENT,
        fields.SUCCESS: result.success,
        fields.STATUS_CODE: result.status_code,
        fields.DURATION_MS: result.meta.duration_ms,
        fields.OUTCOME: "success" if result.success else "failure",
    }
    error = result.error_detail
    if error is not None:
        payload[fields.ERROR_KIND] = error.kind.value
        payload[fields.STAGE] = error.metadata.get("stage")
    with log_context(payload):
        if error is None:
            logger.info("REST call completion")
        else:
            logger.warning("REST call completion: %s", error.message)
