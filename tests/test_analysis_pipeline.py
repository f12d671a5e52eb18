import random
import unittest

from app.ai.config import resolve_generation_parameters
from app.core.config import load_settings
from app.core.errors import EmptyText, MissingCredential, QuotaExceeded, UpstreamError
from app.schemas.analysis import NormalizedSignals, UploadedDocument
from app.services.analysis_service import AnalysisPipeline, assemble_response
from pdf_samples import SAMPLE_RESUME_LINES, build_blank_pdf, build_text_pdf


class RecordingClient:
    model = "gemini-test"

    def __init__(self, text="Portfolio Score: 91. Diamond tier, Expert level.", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    async def generate(self, prompt, params):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


def _document(content: bytes, filename: str = "cv.pdf") -> UploadedDocument:
    return UploadedDocument(content=content, content_type="application/pdf", filename=filename, size_bytes=len(content))


def _pipeline(client, **env) -> AnalysisPipeline:
    settings = load_settings({"GOOGLE_API_KEY": "test-key", **env})
    return AnalysisPipeline(
        settings=settings,
        ai_client=client,
        generation=resolve_generation_parameters(settings),
        rng=random.Random(0),
    )


class AnalysisPipelineTests(unittest.IsolatedAsyncioTestCase):
    async def test_portfolio_variant_attaches_signals_and_links(self):
        client = RecordingClient()
        result = await _pipeline(client).analyze(
            _document(build_text_pdf(SAMPLE_RESUME_LINES)),
            variant="portfolio",
            portfolio_links="https://github.com/alice\nhttps://behance.net/alice",
        )
        self.assertEqual(result.portfolio_score, 91)
        self.assertEqual(result.gamified_level, "Diamond")
        self.assertEqual(result.skill_level, "Expert")
        self.assertEqual(result.portfolio_links, "https://github.com/alice\nhttps://behance.net/alice")
        self.assertEqual(len(client.prompts), 1)

    async def test_project_variant_has_no_signals(self):
        result = await _pipeline(RecordingClient()).analyze(
            _document(build_text_pdf(SAMPLE_RESUME_LINES)),
            variant="project",
            portfolio_links="https://github.com/alice",
        )
        self.assertIsNone(result.portfolio_score)
        self.assertIsNone(result.portfolio_links)

    async def test_empty_text_short_circuits_before_generation(self):
        client = RecordingClient()
        with self.assertRaises(EmptyText):
            await _pipeline(client).analyze(_document(build_blank_pdf()), variant="portfolio")
        self.assertEqual(client.prompts, [])

    async def test_missing_credential_short_circuits_before_extraction(self):
        client = RecordingClient()
        settings = load_settings({})
        pipeline = AnalysisPipeline(settings=settings, ai_client=client, generation=resolve_generation_parameters(settings))
        with self.assertRaises(MissingCredential) as ctx:
            await pipeline.analyze(_document(b"not even parsed"), variant="portfolio")
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(client.prompts, [])

    async def test_upstream_errors_propagate_unchanged(self):
        client = RecordingClient(error=QuotaExceeded())
        with self.assertRaises(QuotaExceeded):
            await _pipeline(client).analyze(_document(build_text_pdf(SAMPLE_RESUME_LINES)), variant="gap_analysis")

    async def test_project_variant_rewords_upstream_failure(self):
        client = RecordingClient(error=UpstreamError(details="backend 503"))
        with self.assertRaises(UpstreamError) as ctx:
            await _pipeline(client).analyze(_document(build_text_pdf(SAMPLE_RESUME_LINES)), variant="project")
        self.assertEqual(ctx.exception.message, "Failed to analyze projects. Please try again later.")
        self.assertEqual(ctx.exception.details, "backend 503")

        with self.assertRaises(UpstreamError) as ctx:
            await _pipeline(client).analyze(_document(build_text_pdf(SAMPLE_RESUME_LINES)), variant="portfolio")
        self.assertEqual(ctx.exception.message, "Failed to analyze resume. Please try again later.")


class AssembleResponseTests(unittest.TestCase):
    def test_serializes_with_camel_case_aliases(self):
        response = assemble_response(
            _document(b"%PDF-1.4", filename="resume.pdf"),
            "Looks good.",
            signals=NormalizedSignals(portfolio_score=40, gamified_level="Bronze", skill_level="Novice"),
            portfolio_links="",
        )
        self.assertEqual(
            response.model_dump(by_alias=True, exclude_none=True),
            {
                "success": True,
                "analysis": "Looks good.",
                "filename": "resume.pdf",
                "fileSize": 8,
                "portfolioScore": 40,
                "gamifiedLevel": "Bronze",
                "skillLevel": "Novice",
                "portfolioLinks": "",
            },
        )

    def test_omits_signals_when_absent(self):
        response = assemble_response(_document(b"%PDF-1.4"), "Text")
        self.assertEqual(
            set(response.model_dump(by_alias=True, exclude_none=True)),
            {"success", "analysis", "filename", "fileSize"},
        )


if __name__ == "__main__":
    unittest.main()
