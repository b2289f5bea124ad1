"""FastAPI server for N5 Master."""

import asyncio
import logging
import os

from fastapi import BackgroundTasks, FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

logger = logging.getLogger(__name__)

from core.catalog import DEFAULT_CATALOG, SUBSECTIONS
from core.classifier import describe, summarize
from core.config import (
    CHARACTER_CATEGORIES, GENERAL, MASTERY_THRESHOLD, INITIAL_INTRO_COUNT, DEFAULT_HINT_MODEL
)
from core.discovery import UnlockTracker, combined_pool, discovered_pool
from core.errors import AnswerRejected, NoMistakesTracked, SessionCompleted, StorageError
from core.evaluator import AnswerEvaluator, INVALID_CREDENTIAL
from core.models import ProgressRecord, QuizSession
from core.session import build_options, build_session, expected_answer
from core.utils import lookup_url, search_url

from server.gemini_provider import GeminiProvider
from server.file_storage import FileStorage


# Pydantic models for API
class StartQuizRequest(BaseModel):
    target: str
    review: bool = False
    user_id: str = "default"


class AnswerRequest(BaseModel):
    answer: str
    user_id: str = "default"


class NextRequest(BaseModel):
    user_id: str = "default"


class CredentialsRequest(BaseModel):
    api_key: str


class QuizStateResponse(BaseModel):
    session_id: str
    target: str
    review_mode: bool
    current_index: int
    total: int
    score: int
    mistakes: list[str]
    completed: bool
    question: Optional[dict]   # {id, char, category, lookup_url} - answer withheld until answered
    options: list[str]
    answered: bool
    last_correct: Optional[bool]
    expected: Optional[str]
    is_processing: bool
    hint_state: str
    mnemonic: Optional[dict]   # {character, mnemonic, example_sentence, translation}
    study_guide: Optional[dict]  # Catalog entry for the mnemonic's character, with lookup links
    hint_error: Optional[str]  # 'hint_unavailable' or 'invalid_credential'
    credential_invalid: bool


class AnswerResponse(BaseModel):
    is_correct: bool
    expected: str
    newly_mastered: bool
    score: int
    hint_pending: bool
    success_count: int
    mistake_count: int


class CategorySummary(BaseModel):
    category: str
    total: int
    mastered: int
    discovered: int


class HomeResponse(BaseModel):
    total_mastered: int
    available: int
    categories: list[CategorySummary]
    unlocked: list[dict]       # Items revealed since the last home view
    credential_invalid: bool


# Global state (in production, use proper DI)
storage = None
ai_provider: GeminiProvider = None
catalog = DEFAULT_CATALOG
user_evaluators: dict[str, AnswerEvaluator] = {}
quiz_sessions: dict[str, QuizSession] = {}
quiz_options: dict[str, tuple[tuple[str, int], list[str]]] = {}  # user_id -> (question token, options)
unlock_trackers: dict[str, UnlockTracker] = {}


app = FastAPI(title="N5 Master API", description="Japanese kana, kanji and vocabulary drills")


def get_evaluator(user_id: str = "default") -> AnswerEvaluator:
    """Get or create the evaluator (and progress) for a user."""
    if user_id not in user_evaluators:
        try:
            stored = storage.load_progress(user_id)
        except StorageError as e:
            # Not cached; the next request retries the load
            raise HTTPException(status_code=503, detail=str(e))
        progress = ProgressRecord.from_dict(stored)
        evaluator = AnswerEvaluator(
            progress,
            persist=lambda data: storage.save_progress(data, user_id),
            ai_provider=ai_provider
        )
        if ai_provider is None:
            evaluator.credential_invalid = True
        user_evaluators[user_id] = evaluator
        unlock_trackers[user_id] = UnlockTracker.from_progress(catalog, progress)
    return user_evaluators[user_id]


def get_progress(user_id: str = "default") -> ProgressRecord:
    return get_evaluator(user_id).progress


def get_session(user_id: str) -> QuizSession:
    session = quiz_sessions.get(user_id)
    if session is None:
        raise HTTPException(status_code=404, detail="No active quiz")
    return session


def get_options(user_id: str, session: QuizSession) -> list[str]:
    """Options for the current question, generated once per question."""
    question = session.current_question
    if question is None:
        return []
    token = (session.id, session.current_index)
    cached = quiz_options.get(user_id)
    if cached and cached[0] == token:
        return cached[1]
    options = build_options(question, catalog)
    quiz_options[user_id] = (token, options)
    return options


def study_guide(user_id: str, mnemonic: dict | None) -> dict | None:
    """Reference data for the character a mnemonic is about."""
    if not mnemonic:
        return None
    item = catalog.find_by_char(mnemonic['character'])
    if item is None:
        return None
    return {
        **describe(item, get_progress(user_id)),
        'lookup_url': lookup_url(item.char, item.category),
        'search_url': search_url(item.char)
    }


def quiz_state(user_id: str, session: QuizSession) -> QuizStateResponse:
    question = session.current_question
    question_data = None
    expected = None
    if question is not None:
        question_data = {
            'id': question.id,
            'char': question.char,
            'category': question.category,
            'lookup_url': lookup_url(question.char, question.category)
        }
        if session.answered:
            expected = expected_answer(question)
    return QuizStateResponse(
        session_id=session.id,
        target=session.target,
        review_mode=session.review_mode,
        current_index=session.current_index,
        total=len(session.questions),
        score=session.score,
        mistakes=session.mistakes,
        completed=session.completed,
        question=question_data,
        options=get_options(user_id, session),
        answered=session.answered,
        last_correct=session.last_correct,
        expected=expected,
        is_processing=session.is_processing,
        hint_state=session.hint_state,
        mnemonic=session.mnemonic,
        study_guide=study_guide(user_id, session.mnemonic),
        hint_error=session.hint_error,
        credential_invalid=get_evaluator(user_id).credential_invalid
    )


async def resolve_hint_background(user_id: str, token: tuple[str, int]) -> None:
    """Generate a mnemonic off the event loop and apply it if the question is still current."""
    evaluator = user_evaluators.get(user_id)
    session = quiz_sessions.get(user_id)
    if evaluator is None or session is None or session.id != token[0]:
        return
    item = session.questions[token[1]]
    logger.info(f"Requesting mnemonic for {user_id}: {item.char} ({item.id})")
    loop = asyncio.get_event_loop()
    outcome = await loop.run_in_executor(None, evaluator.generate_hint, item)

    # The user may have advanced or abandoned the quiz meanwhile
    current = quiz_sessions.get(user_id)
    if current is None or not current.resolve_hint(token, outcome['mnemonic'], outcome['error']):
        logger.info(f"Discarded stale mnemonic for {user_id}: {item.id}")
        return
    if outcome['error'] == INVALID_CREDENTIAL:
        logger.warning("Gemini rejected the API key; hints disabled until a new key is set")


@app.on_event("startup")
async def startup():
    """Initialize storage and AI provider on startup."""
    global storage, ai_provider

    # Use file storage by default, set N5MASTER_STORAGE=postgres to use PostgreSQL
    storage_type = os.environ.get('N5MASTER_STORAGE', 'file')
    if storage_type == 'postgres':
        from server.postgres_storage import PostgresStorage
        storage = PostgresStorage()
        logger.info("Using PostgreSQL storage")
    else:
        storage = FileStorage()
        logger.info("Using file storage")

    # Get API key from environment variable first, then fall back to config file
    api_key = os.environ.get('GEMINI_API_KEY')
    if not api_key:
        try:
            config = storage.load_config()
            api_key = config.get('gemini_api_key')
        except FileNotFoundError:
            pass

    if api_key:
        ai_provider = GeminiProvider(api_key, model_name=DEFAULT_HINT_MODEL)
        logger.info(f"AI provider initialized: {DEFAULT_HINT_MODEL}")
    else:
        logger.warning(
            "GEMINI_API_KEY not set and no config file found; mnemonic hints are disabled. "
            "Set GEMINI_API_KEY or create ~/.config/n5master/config.json"
        )


@app.get("/")
async def root():
    return {"service": "n5master", "status": "ok"}


@app.get("/api/home", response_model=HomeResponse)
async def get_home(user_id: str = "default"):
    """Overview of mastery per category, plus anything unlocked since the last visit."""
    evaluator = get_evaluator(user_id)
    progress = evaluator.progress

    categories = []
    for category in CHARACTER_CATEGORIES:
        items = catalog.items(category)
        categories.append(CategorySummary(
            category=category,
            total=len(items),
            mastered=progress.mastered_count(items),
            discovered=len(discovered_pool(category, catalog, progress))
        ))

    unlocked = unlock_trackers[user_id].observe_all(catalog, progress)
    for item in unlocked:
        logger.info(f"Unlocked for {user_id}: {item.char} ({item.id})")

    return HomeResponse(
        total_mastered=len(progress.mastered_ids),
        available=len(combined_pool(catalog, progress)),
        categories=categories,
        unlocked=[item.to_dict() for item in unlocked],
        credential_invalid=evaluator.credential_invalid
    )


@app.get("/api/pool/{category}")
async def get_pool(category: str, user_id: str = "default"):
    """Discovered items for a category (or all categories for 'general')."""
    progress = get_progress(user_id)
    try:
        if category == GENERAL:
            pool = combined_pool(catalog, progress)
        else:
            pool = discovered_pool(category, catalog, progress)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "category": category,
        "total": len(pool),
        "items": [describe(item, progress) for item in pool]
    }


@app.post("/api/quiz/start", response_model=QuizStateResponse)
async def start_quiz(request: StartQuizRequest):
    """Start a new quiz, replacing any active one."""
    progress = get_progress(request.user_id)
    try:
        session = build_session(request.target, request.review, progress, catalog)
    except NoMistakesTracked as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    quiz_sessions[request.user_id] = session
    quiz_options.pop(request.user_id, None)
    logger.info(f"Quiz started for {request.user_id}: target={request.target}, "
                f"review={request.review}, questions={len(session.questions)}")
    return quiz_state(request.user_id, session)


@app.get("/api/quiz", response_model=QuizStateResponse)
async def get_quiz(user_id: str = "default"):
    """Current quiz state, including any mnemonic that has arrived."""
    return quiz_state(user_id, get_session(user_id))


@app.post("/api/quiz/answer", response_model=AnswerResponse)
async def submit_answer(request: AnswerRequest, background_tasks: BackgroundTasks):
    """Evaluate an answer. On a mistake a mnemonic is requested in the background."""
    evaluator = get_evaluator(request.user_id)
    session = get_session(request.user_id)
    try:
        result = evaluator.submit(session, request.answer)
    except (SessionCompleted, AnswerRejected) as e:
        raise HTTPException(status_code=409, detail=str(e))

    item = result['item']
    logger.info(f"Answer from {request.user_id} for {item.id}: correct={result['is_correct']}")
    if result['newly_mastered']:
        logger.info(f"Mastered by {request.user_id}: {item.char} ({item.id})")

    if result['hint_token'] is not None:
        background_tasks.add_task(resolve_hint_background, request.user_id, result['hint_token'])

    return AnswerResponse(
        is_correct=result['is_correct'],
        expected=result['expected'],
        newly_mastered=result['newly_mastered'],
        score=session.score,
        hint_pending=result['hint_token'] is not None,
        success_count=evaluator.progress.success_count(item.id),
        mistake_count=evaluator.progress.mistake_count(item.id)
    )


@app.post("/api/quiz/next", response_model=QuizStateResponse)
async def next_question(request: NextRequest):
    """Advance to the next question; a pending mnemonic for the old one is dropped."""
    session = get_session(request.user_id)
    if session.completed:
        raise HTTPException(status_code=409, detail="Session is already completed")
    if not session.answered:
        raise HTTPException(status_code=409, detail="Answer the current question first")
    session.advance()
    return quiz_state(request.user_id, session)


@app.get("/api/quiz/summary")
async def get_quiz_summary(user_id: str = "default"):
    """Score and missed items for the current quiz."""
    session = get_session(user_id)
    progress = get_progress(user_id)
    missed = []
    for item_id in dict.fromkeys(session.mistakes):
        item = catalog.get(item_id)
        if item is not None:
            missed.append(describe(item, progress))
    return {
        "target": session.target,
        "completed": session.completed,
        "score": session.score,
        "total": len(session.questions),
        "mistakes": session.mistakes,
        "missed_items": missed
    }


@app.delete("/api/quiz")
async def abandon_quiz(user_id: str = "default"):
    """Drop the active quiz. A pending mnemonic, if any, is discarded when it arrives."""
    session = quiz_sessions.pop(user_id, None)
    quiz_options.pop(user_id, None)
    return {"abandoned": session is not None}


@app.get("/api/items/{item_id}")
async def get_item(item_id: str, user_id: str = "default"):
    """Item detail with status, proficiency and lookup links."""
    item = catalog.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Unknown item: {item_id}")
    progress = get_progress(user_id)
    return {
        **describe(item, progress),
        "lookup_url": lookup_url(item.char, item.category),
        "search_url": search_url(item.char)
    }


@app.get("/api/progress")
async def get_progress_overview(user_id: str = "default"):
    """Per-script proficiency breakdown."""
    progress = get_progress(user_id)
    scripts = []
    for category in CHARACTER_CATEGORIES:
        items = catalog.items(category)
        scripts.append({
            "category": category,
            **summarize(items, progress),
            "subsections": [
                {
                    "name": f"{name} ({len(section_items)})",
                    "items": [describe(item, progress) for item in section_items]
                }
                for name, section_items in SUBSECTIONS[category]
            ]
        })
    return {
        "mastery_threshold": MASTERY_THRESHOLD,
        "initial_intro_count": INITIAL_INTRO_COUNT,
        "total_mastered": len(progress.mastered_ids),
        "scripts": scripts
    }


@app.get("/api/vocabulary")
async def search_vocabulary(search: str = "", user_id: str = "default"):
    progress = get_progress(user_id)
    items = catalog.search_vocabulary(search)
    return {
        "total": len(items),
        "items": [
            {**describe(item, progress), "lookup_url": lookup_url(item.char, item.category)}
            for item in items
        ]
    }


@app.get("/api/grammar")
async def search_grammar(search: str = ""):
    points = catalog.search_grammar(search)
    return {
        "total": len(points),
        "points": [point.to_dict() for point in points]
    }


@app.get("/api/users")
async def list_users():
    """List users that have stored progress."""
    return {"users": storage.list_users()}


@app.delete("/api/progress")
async def reset_progress(user_id: str = "default"):
    """Erase a user's stored progress and drop their in-memory state."""
    try:
        deleted = storage.delete_progress(user_id)
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))
    user_evaluators.pop(user_id, None)
    quiz_sessions.pop(user_id, None)
    quiz_options.pop(user_id, None)
    unlock_trackers.pop(user_id, None)
    logger.info(f"Progress reset for {user_id} (stored record deleted: {deleted})")
    return {"deleted": deleted}


@app.post("/api/credentials")
async def set_credentials(request: CredentialsRequest):
    """Install a new Gemini API key and re-enable hints for everyone."""
    global ai_provider
    if not request.api_key.strip():
        raise HTTPException(status_code=400, detail="API key must not be empty")
    ai_provider = GeminiProvider(request.api_key.strip(), model_name=DEFAULT_HINT_MODEL)
    for evaluator in user_evaluators.values():
        evaluator.reset_credentials(ai_provider)
    logger.info("Gemini API key replaced; hints re-enabled")
    return {"success": True}


@app.get("/api/stats")
async def get_api_stats():
    """Gemini API usage statistics."""
    if ai_provider is None:
        return {"model": None, "calls": 0, "failures": 0, "total_ms": 0, "avg_ms": 0}
    return ai_provider.get_stats()


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
