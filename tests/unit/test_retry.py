import pytest

from newsbrief.retry import get_retryer


class TransientError(Exception):
    pass


class PermanentError(Exception):
    pass


def _run(retryer, operation):
    for attempt in retryer:
        with attempt:
            return operation()


def test_retries_until_success(mocker):
    mocker.patch('tenacity.nap.time.sleep')
    operation = mocker.Mock(side_effect=[TransientError('first'), 'ok'])

    assert _run(get_retryer(max_attempts=2), operation) == 'ok'
    assert operation.call_count == 2


def test_reraises_last_error(mocker):
    mocker.patch('tenacity.nap.time.sleep')
    operation = mocker.Mock(side_effect=TransientError('always'))

    with pytest.raises(TransientError):
        _run(get_retryer(max_attempts=3), operation)
    assert operation.call_count == 3


def test_never_retry_fails_immediately(mocker):
    operation = mocker.Mock(side_effect=PermanentError('bad key'))

    with pytest.raises(PermanentError):
        _run(get_retryer(max_attempts=3, never_retry=(PermanentError,)), operation)
    assert operation.call_count == 1
