from unittest.mock import MagicMock, patch

from factboard.jobs.scheduled import INGEST_JOB_ID, STARTUP_JOB_ID, _ingest_job, register_jobs
from factboard.models.fact import Fact


class TestIngestJob:
    def test_runs_pipeline_in_app_context(self, app, db_session, api_response):
        with patch('factboard.integrations.facts_api.requests.get',
                   return_value=api_response({'data': ['Scheduled fact.']})):
            result = _ingest_job(app)

        assert result['status'] == 'succeeded'
        assert Fact.query.count() == 1

    def test_crash_is_swallowed(self, app, db_session):
        with patch('factboard.pipeline.ingest.run', side_effect=RuntimeError('boom')):
            assert _ingest_job(app) is None

    def test_failed_run_does_not_affect_next(self, app, db_session, api_response):
        with patch('factboard.pipeline.ingest.run', side_effect=RuntimeError('boom')):
            _ingest_job(app)
        with patch('factboard.integrations.facts_api.requests.get',
                   return_value=api_response({'data': ['Next run fact.']})):
            result = _ingest_job(app)

        assert result['status'] == 'succeeded'
        assert Fact.query.count() == 1


class TestRegisterJobs:
    def test_interval_job_registered(self, app):
        scheduler = MagicMock()
        register_jobs(scheduler, app)

        scheduler.add_job.assert_called_once()
        kwargs = scheduler.add_job.call_args.kwargs
        assert kwargs['id'] == INGEST_JOB_ID
        assert kwargs['trigger'] == 'interval'
        assert kwargs['seconds'] == app.config['INGEST_INTERVAL_SECONDS']
        assert kwargs['args'] == [app]
        assert kwargs['coalesce'] is True
        assert kwargs['replace_existing'] is True

    def test_startup_run_when_enabled(self, app):
        scheduler = MagicMock()
        app.config['INGEST_ON_STARTUP'] = True
        try:
            register_jobs(scheduler, app)
        finally:
            app.config['INGEST_ON_STARTUP'] = False

        ids = [c.kwargs['id'] for c in scheduler.add_job.call_args_list]
        assert ids == [INGEST_JOB_ID, STARTUP_JOB_ID]
