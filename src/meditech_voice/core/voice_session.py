"""
Voice session state machine.

States: DISABLED -> IDLE <-> LISTENING, IDLE <-> SPEAKING, and any state ->
DISABLED when voice is switched off. The controller owns the state, opens
recognition sessions, interprets their transcripts and routes the resulting
intents to the navigation collaborator or to spoken feedback.

Platform callbacks may arrive on backend worker threads; every transition
happens under one re-entrant lock. Callbacks from a session that is no longer
current are recognised by a generation counter and ignored.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

from ..audio.backends import RecognitionError, Utterance
from ..audio.speech_input import RecognitionSession, SpeechInputEngine
from ..audio.speech_output import SpeechOutputEngine
from ..commands.interpreter import CommandInterpreter, CommandIntent, IntentType
from ..i18n.locale_store import LocaleStore
from ..i18n.locales import LocaleCode

logger = logging.getLogger(__name__)

Navigator = Callable[[CommandIntent], None]


class VoiceSessionState(Enum):
    """Voice session state enumeration"""
    DISABLED = "disabled"
    IDLE = "idle"
    LISTENING = "listening"
    SPEAKING = "speaking"


@dataclass(frozen=True)
class VoiceStatus:
    """Snapshot of the observable voice fields"""
    state: VoiceSessionState
    is_listening: bool
    is_voice_enabled: bool
    transcript: str
    locale: str


StatusListener = Callable[[VoiceStatus], None]


class VoiceSessionController:
    """Coordinates speech input, speech output and navigation for one process"""

    def __init__(self, locale_store: LocaleStore, output: SpeechOutputEngine,
                 input_engine: SpeechInputEngine, interpreter: Optional[CommandInterpreter] = None,
                 navigator: Optional[Navigator] = None, recognition_timeout: float = 0.0,
                 announce_listening: bool = False):
        self.locale_store = locale_store
        self.output = output
        self.input = input_engine
        self.interpreter = interpreter or CommandInterpreter()
        self.navigator = navigator
        self.recognition_timeout = recognition_timeout
        self.announce_listening = announce_listening

        self.last_intent: Optional[CommandIntent] = None
        self._state = VoiceSessionState.DISABLED
        self._transcript = ""
        self._session: Optional[RecognitionSession] = None
        self._generation = 0
        self._feedback: Optional[Utterance] = None
        self._watchdog: Optional[threading.Timer] = None
        self._listeners: List[StatusListener] = []
        self._lock = threading.RLock()

        self.output.enabled = False
        self.output.add_listener(self._on_utterance_finished)

    # Observable fields

    @property
    def state(self) -> VoiceSessionState:
        with self._lock:
            return self._state

    @property
    def is_listening(self) -> bool:
        return self.state is VoiceSessionState.LISTENING

    @property
    def is_voice_enabled(self) -> bool:
        return self.state is not VoiceSessionState.DISABLED

    @property
    def transcript(self) -> str:
        with self._lock:
            return self._transcript

    @property
    def voice_output_available(self) -> bool:
        return self.output.is_available()

    @property
    def voice_input_available(self) -> bool:
        return self.input.is_available()

    def status(self) -> VoiceStatus:
        with self._lock:
            return VoiceStatus(
                state=self._state,
                is_listening=self._state is VoiceSessionState.LISTENING,
                is_voice_enabled=self._state is not VoiceSessionState.DISABLED,
                transcript=self._transcript,
                locale=self.locale_store.get_locale().code,
            )

    def subscribe(self, listener: StatusListener) -> Callable[[], None]:
        """Register listener(status) for state and transcript changes"""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # Public operations

    def toggle_voice(self) -> VoiceSessionState:
        """Switch voice on (DISABLED -> IDLE) or off (any state -> DISABLED)"""
        with self._lock:
            if self._state is VoiceSessionState.DISABLED:
                self.output.enabled = True
                self._set_state(VoiceSessionState.IDLE)
                t = self.locale_store.translate
                self._speak_feedback(f"{t('voiceNavigation')} {t('enabled')}")
            else:
                self._disable()
            return self._state

    def start_listening(self) -> bool:
        """Open a recognition session; a no-op unless IDLE or SPEAKING"""
        with self._lock:
            if self._state not in (VoiceSessionState.IDLE, VoiceSessionState.SPEAKING):
                logger.debug(f"Ignoring start_listening in state {self._state.value}")
                return False
            if not self.input.is_available():
                logger.debug("Speech recognition unavailable, not listening")
                return False

            if self._state is VoiceSessionState.SPEAKING:
                # The microphone must not pick up our own feedback
                self._feedback = None
                self.output.cancel()

            self._generation += 1
            generation = self._generation
            locale = self.locale_store.get_locale()
            self._set_state(VoiceSessionState.LISTENING)

            # One locale read binds both the speech tag and the keyword set
            session, error = self.input.start_session(
                on_result=lambda text: self._on_recognition_result(generation, locale, text),
                on_error=lambda reason: self._on_recognition_error(generation, reason),
                locale=locale,
            )
            if session is None:
                logger.warning(f"Could not start listening: {error.value if error else 'unknown'}")
                self._set_state(VoiceSessionState.IDLE)
                return False

            # The session may already have ended synchronously
            if generation == self._generation and self._state is VoiceSessionState.LISTENING:
                self._session = session
                self._start_watchdog(generation)
                if self.announce_listening:
                    self.output.speak(self.locale_store.translate("listening"))
            return True

    def stop_listening(self) -> bool:
        """Request cancellation; the state returns to IDLE on the terminal callback"""
        with self._lock:
            if self._state is not VoiceSessionState.LISTENING or self._session is None:
                return False
            session = self._session
            return self.input.stop_session(session)

    def speak(self, text: str) -> bool:
        """Speak text without changing the session state"""
        with self._lock:
            if self._state is VoiceSessionState.DISABLED:
                return False
            if self._state is VoiceSessionState.SPEAKING:
                # Interrupting feedback hands SPEAKING over to the new utterance
                return self._speak_feedback(text) is not None
            return self.output.speak(text) is not None

    def change_locale(self, code: Union[str, LocaleCode]) -> bool:
        """
        Select a locale and confirm the change by voice when voice is on.

        No confirmation is spoken while LISTENING.
        """
        if not self.locale_store.set_locale(code):
            return False

        locale = self.locale_store.get_locale()
        with self._lock:
            if self._state in (VoiceSessionState.IDLE, VoiceSessionState.SPEAKING):
                self._speak_feedback(
                    self.locale_store.translate("languageChanged", language=locale.native_name)
                )
            self._notify()
        return True

    def shutdown(self):
        """Cancel any session and utterance and return to DISABLED"""
        with self._lock:
            if self._state is not VoiceSessionState.DISABLED:
                self._disable()

    # Internal transitions

    def _set_state(self, new_state: VoiceSessionState):
        old_state = self._state
        if new_state is old_state:
            return
        self._state = new_state
        logger.debug(f"Voice session state: {old_state.value} -> {new_state.value}")
        self._notify()

    def _notify(self):
        status = self.status()
        for listener in list(self._listeners):
            try:
                listener(status)
            except Exception:
                logger.exception("Voice status listener failed")

    def _disable(self):
        session = self._session
        self._session = None
        self._generation += 1
        self._feedback = None
        self._cancel_watchdog()
        self._set_state(VoiceSessionState.DISABLED)

        if session is not None:
            self.input.stop_session(session)
        self.output.cancel()
        self.output.enabled = False

    def _speak_feedback(self, text: str) -> Optional[Utterance]:
        """
        Speak controller feedback, entering SPEAKING when issued from IDLE.

        From SPEAKING the new utterance takes over the state, so cancelling the
        previous one does not end SPEAKING while audio is still playing.
        """
        if self._state is VoiceSessionState.DISABLED:
            return None

        previous = self._feedback
        self._feedback = None
        utterance = self.output.speak(text)
        current = self.output.current_utterance

        if utterance is not None and current is utterance:
            if self._state in (VoiceSessionState.IDLE, VoiceSessionState.SPEAKING):
                self._feedback = utterance
                self._set_state(VoiceSessionState.SPEAKING)
        elif previous is not None and current is previous:
            self._feedback = previous
        elif self._state is VoiceSessionState.SPEAKING:
            self._set_state(VoiceSessionState.IDLE)
        return utterance

    def _on_utterance_finished(self, utterance: Utterance, completed: bool):
        with self._lock:
            if self._state is VoiceSessionState.SPEAKING and utterance is self._feedback:
                self._feedback = None
                self._set_state(VoiceSessionState.IDLE)

    def _accepts_terminal(self, generation: int) -> bool:
        return generation == self._generation and self._state is VoiceSessionState.LISTENING

    def _finish_session(self):
        self._session = None
        self._cancel_watchdog()
        self._set_state(VoiceSessionState.IDLE)

    def _on_recognition_result(self, generation: int, locale: LocaleCode, text: str):
        with self._lock:
            if not self._accepts_terminal(generation):
                logger.debug("Dropping result from a stale recognition session")
                return

            self._transcript = text
            self._finish_session()

            intent = self.interpreter.interpret(text, locale)
            self.last_intent = intent
            self._dispatch(intent)

    def _on_recognition_error(self, generation: int, reason: RecognitionError):
        with self._lock:
            if not self._accepts_terminal(generation):
                return
            logger.info(f"Recognition ended without a command: {reason.value}")
            self._finish_session()

    def _dispatch(self, intent: CommandIntent):
        if intent.is_navigation:
            if self.navigator is None:
                logger.warning(f"No navigator registered for {intent.kind.value}")
                return
            try:
                self.navigator(intent)
            except Exception:
                logger.exception(f"Navigation failed for {intent.kind.value}")
        elif intent.kind is IntentType.REQUEST_HELP:
            self._speak_feedback(self.locale_store.translate("speakToNavigate"))
        else:
            self._speak_feedback(self.locale_store.translate("didNotUnderstand"))

    def _start_watchdog(self, generation: int):
        if not self.recognition_timeout:
            return
        timer = threading.Timer(self.recognition_timeout, self._on_watchdog, args=(generation,))
        timer.daemon = True
        self._watchdog = timer
        timer.start()

    def _cancel_watchdog(self):
        if self._watchdog is not None:
            self._watchdog.cancel()
            self._watchdog = None

    def _on_watchdog(self, generation: int):
        with self._lock:
            if not self._accepts_terminal(generation) or self._session is None:
                return
            session = self._session
            self.input.expire_session(session)
