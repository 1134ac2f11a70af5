"""Voting process service.

This module implements the VotingProcessService aggregate: the workflow
state machine, the voter registry, the proposal registry and the tally,
all sharing one phase variable and one owner identity.

Workflow:
    REGISTERING_VOTERS            add_voter (owner)
      start_proposals_registering (owner, appends GENESIS at index 0)
    PROPOSALS_REGISTRATION_STARTED  add_proposal (voters)
      end_proposals_registering (owner)
    PROPOSALS_REGISTRATION_ENDED
      start_voting_session (owner)
    VOTING_SESSION_STARTED        set_vote (voters)
      end_voting_session (owner)
    VOTING_SESSION_ENDED
      tally_votes (owner, sets winning_proposal_id)
    VOTES_TALLIED

Developer Golden Rules:
1. Check authorization first, then phase, then operation-specific input
2. Validate everything before mutating anything
3. Emit exactly one event per successful mutation, after the mutation
4. Never swallow a failure - log it and raise

Usage:
    service = VotingProcessService(owner="0xA", event_emitter=event_log)
    service.add_voter("0xA", "0xB")
    service.start_proposals_registering("0xA")
    proposal_id = service.add_proposal("0xB", "Plant more trees")
"""

from __future__ import annotations

import threading
from collections.abc import Callable

import structlog

from ballot_workflow.application.ports.voting_event_emitter import (
    VotingEventEmitterProtocol,
)
from ballot_workflow.application.services.base import LoggingMixin
from ballot_workflow.domain.errors import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    EmptyInputError,
    GenesisNotVotableError,
    NotOwnerError,
    NotVoterError,
    PhaseError,
    ProposalNotFoundError,
)
from ballot_workflow.domain.events.voting import (
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTED_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    WORKFLOW_STATUS_CHANGE_EVENT_TYPE,
    ProposalRegisteredPayload,
    VotedPayload,
    VoterRegisteredPayload,
    WorkflowStatusChangePayload,
)
from ballot_workflow.domain.models.proposal import Proposal, genesis_proposal
from ballot_workflow.domain.models.voter import UNREGISTERED_VOTER, Voter
from ballot_workflow.domain.models.workflow_phase import (
    WorkflowPhase,
    WorkflowTransition,
)
from ballot_workflow.domain.services.tally import select_winning_proposal

GENESIS_PROPOSAL_ID: int = 0


class VotingProcessService(LoggingMixin):
    """Phase-gated voting process with owner and voter access control.

    All state is owned by this instance and changes only through its
    operations. Every operation runs under one re-entrant lock, so each
    mutation is applied in full before the next operation is admitted.
    Observers notified from inside emit() may call the read operations.

    Attributes:
        _owner: Fixed owner identity.
        _event_emitter: Port receiving one event per accepted mutation.
        _workflow_status: Current phase.
        _voters: Voter records keyed by identity (registered voters only).
        _proposals: Proposal sequence; index 0 is GENESIS once registration opens.
        _winning_proposal_id: Set once by tally_votes.
        _transition_history: Applied phase transitions, oldest first.
    """

    def __init__(
        self,
        owner: str,
        event_emitter: VotingEventEmitterProtocol,
    ) -> None:
        """Initialize a voting process in the REGISTERING_VOTERS phase.

        Args:
            owner: Identity allowed to run owner-only operations.
            event_emitter: Port receiving the emitted events.

        Raises:
            ValueError: If owner is empty.
        """
        if not owner:
            raise ValueError("owner must be a non-empty identity")
        self._owner = owner
        self._event_emitter = event_emitter
        self._workflow_status = WorkflowPhase.REGISTERING_VOTERS
        self._voters: dict[str, Voter] = {}
        self._proposals: list[Proposal] = []
        self._winning_proposal_id = 0
        self._transition_history: list[WorkflowTransition] = []
        self._lock = threading.RLock()
        self._init_logger(owner=owner)
        self._log.info("voting_process_created")

    # Read-only accessors

    @property
    def owner(self) -> str:
        """Identity allowed to run owner-only operations."""
        return self._owner

    @property
    def workflow_status(self) -> WorkflowPhase:
        """Current workflow phase."""
        with self._lock:
            return self._workflow_status

    @property
    def winning_proposal_id(self) -> int:
        """Index of the winning proposal; 0 until votes are tallied."""
        with self._lock:
            return self._winning_proposal_id

    @property
    def proposal_count(self) -> int:
        """Number of proposals in the registry, GENESIS included."""
        with self._lock:
            return len(self._proposals)

    @property
    def transition_history(self) -> tuple[WorkflowTransition, ...]:
        """Applied phase transitions, oldest first."""
        with self._lock:
            return tuple(self._transition_history)

    # Voter registry

    def add_voter(self, caller: str, voter_address: str) -> None:
        """Register an identity as a voter.

        Args:
            caller: Identity invoking the operation (must be the owner).
            voter_address: Identity to register.

        Raises:
            NotOwnerError: If caller is not the owner.
            PhaseError: If the process is not in REGISTERING_VOTERS.
            EmptyInputError: If voter_address is empty.
            AlreadyRegisteredError: If voter_address is already registered.
        """
        with self._lock:
            log = self._log_operation(
                "add_voter", caller=caller, voter_address=voter_address
            )
            self._require_owner(caller, log)
            self._require_phase("add_voter", WorkflowPhase.REGISTERING_VOTERS, log)
            if not voter_address:
                raise self._reject(
                    log, "voter_rejected", EmptyInputError("voter_address")
                )
            if self._voters.get(voter_address, UNREGISTERED_VOTER).is_registered:
                raise self._reject(
                    log, "voter_rejected", AlreadyRegisteredError(voter_address)
                )

            self._voters[voter_address] = UNREGISTERED_VOTER.registered()
            self._event_emitter.emit(
                VOTER_REGISTERED_EVENT_TYPE,
                VoterRegisteredPayload(voter_address=voter_address),
            )
            log.info("voter_registered", voter_count=len(self._voters))

    def get_voter(self, caller: str, voter_address: str) -> Voter:
        """Read the voter record of any identity.

        Identities never registered read as an all-false record rather
        than failing; only the caller's own membership is checked.

        Args:
            caller: Identity invoking the operation (must be a voter).
            voter_address: Identity to look up.

        Returns:
            The Voter record for voter_address.

        Raises:
            NotVoterError: If caller is not a registered voter.
        """
        with self._lock:
            log = self._log_operation(
                "get_voter", caller=caller, voter_address=voter_address
            )
            self._require_voter(caller, log)
            return self._voters.get(voter_address, UNREGISTERED_VOTER)

    # Proposal registry

    def add_proposal(self, caller: str, description: str) -> int:
        """Append a proposal to the registry.

        Args:
            caller: Identity invoking the operation (must be a voter).
            description: Proposal text. Only the empty string is rejected.

        Returns:
            Index of the new proposal.

        Raises:
            NotVoterError: If caller is not a registered voter.
            PhaseError: If proposal registration is not open.
            EmptyInputError: If description is empty.
        """
        with self._lock:
            log = self._log_operation("add_proposal", caller=caller)
            self._require_voter(caller, log)
            self._require_phase(
                "add_proposal", WorkflowPhase.PROPOSALS_REGISTRATION_STARTED, log
            )
            if not description:
                raise self._reject(
                    log, "proposal_rejected", EmptyInputError("description")
                )

            self._proposals.append(Proposal(description=description))
            proposal_id = len(self._proposals) - 1
            self._event_emitter.emit(
                PROPOSAL_REGISTERED_EVENT_TYPE,
                ProposalRegisteredPayload(proposal_id=proposal_id),
            )
            log.info("proposal_registered", proposal_id=proposal_id)
            return proposal_id

    def get_one_proposal(self, caller: str, proposal_id: int) -> Proposal:
        """Read one proposal by index.

        Args:
            caller: Identity invoking the operation (must be a voter).
            proposal_id: Index of the proposal.

        Returns:
            The Proposal at proposal_id.

        Raises:
            NotVoterError: If caller is not a registered voter.
            ProposalNotFoundError: If proposal_id is out of bounds.
        """
        with self._lock:
            log = self._log_operation(
                "get_one_proposal", caller=caller, proposal_id=proposal_id
            )
            self._require_voter(caller, log)
            self._require_proposal(proposal_id, log)
            return self._proposals[proposal_id]

    def set_vote(self, caller: str, proposal_id: int) -> None:
        """Cast the caller's single vote.

        The voter record and the proposal's vote count are replaced
        together under the process lock.

        Args:
            caller: Identity invoking the operation (must be a voter).
            proposal_id: Index of the proposal to vote for.

        Raises:
            NotVoterError: If caller is not a registered voter.
            PhaseError: If the voting session is not open.
            AlreadyVotedError: If caller has already voted.
            ProposalNotFoundError: If proposal_id is out of bounds.
            GenesisNotVotableError: If proposal_id is the GENESIS sentinel.
        """
        with self._lock:
            log = self._log_operation(
                "set_vote", caller=caller, proposal_id=proposal_id
            )
            self._require_voter(caller, log)
            self._require_phase("set_vote", WorkflowPhase.VOTING_SESSION_STARTED, log)
            voter = self._voters[caller]
            if voter.has_voted:
                raise self._reject(
                    log,
                    "vote_rejected",
                    AlreadyVotedError(caller, voter.voted_proposal_id),
                )
            self._require_proposal(proposal_id, log)
            if proposal_id == GENESIS_PROPOSAL_ID:
                raise self._reject(
                    log, "vote_rejected", GenesisNotVotableError(proposal_id)
                )

            updated_voter = voter.with_vote(proposal_id)
            updated_proposal = self._proposals[proposal_id].with_vote()
            self._voters[caller] = updated_voter
            self._proposals[proposal_id] = updated_proposal
            self._event_emitter.emit(
                VOTED_EVENT_TYPE,
                VotedPayload(voter=caller, proposal_id=proposal_id),
            )
            log.info("vote_cast", vote_count=updated_proposal.vote_count)

    # Workflow transitions

    def start_proposals_registering(self, caller: str) -> None:
        """Open proposal registration and append the GENESIS sentinel.

        Raises:
            NotOwnerError: If caller is not the owner.
            PhaseError: If the process is not in REGISTERING_VOTERS.
        """
        self._advance(
            caller,
            "start_proposals_registering",
            WorkflowPhase.REGISTERING_VOTERS,
            on_enter=lambda: self._proposals.append(genesis_proposal()),
        )

    def end_proposals_registering(self, caller: str) -> None:
        """Close proposal registration.

        Raises:
            NotOwnerError: If caller is not the owner.
            PhaseError: If proposal registration is not open.
        """
        self._advance(
            caller,
            "end_proposals_registering",
            WorkflowPhase.PROPOSALS_REGISTRATION_STARTED,
        )

    def start_voting_session(self, caller: str) -> None:
        """Open the voting session.

        Raises:
            NotOwnerError: If caller is not the owner.
            PhaseError: If proposal registration has not ended.
        """
        self._advance(
            caller,
            "start_voting_session",
            WorkflowPhase.PROPOSALS_REGISTRATION_ENDED,
        )

    def end_voting_session(self, caller: str) -> None:
        """Close the voting session.

        Raises:
            NotOwnerError: If caller is not the owner.
            PhaseError: If the voting session is not open.
        """
        self._advance(
            caller,
            "end_voting_session",
            WorkflowPhase.VOTING_SESSION_STARTED,
        )

    def tally_votes(self, caller: str) -> int:
        """Determine the winning proposal and close the process.

        Returns:
            The winning proposal index.

        Raises:
            NotOwnerError: If caller is not the owner.
            PhaseError: If the voting session has not ended.
        """
        with self._lock:
            self._advance(
                caller,
                "tally_votes",
                WorkflowPhase.VOTING_SESSION_ENDED,
                on_enter=self._tally,
            )
            return self._winning_proposal_id

    # Internals

    def _tally(self) -> None:
        self._winning_proposal_id = select_winning_proposal(self._proposals)
        self._log.info(
            "votes_tallied",
            winning_proposal_id=self._winning_proposal_id,
            total_votes=sum(p.vote_count for p in self._proposals),
        )

    def _advance(
        self,
        caller: str,
        operation: str,
        expected_phase: WorkflowPhase,
        on_enter: Callable[[], None] | None = None,
    ) -> None:
        """Move the workflow one step forward from expected_phase.

        on_enter runs after every guard has passed and before the phase
        changes, so its effect is in place when the status change is emitted.
        """
        with self._lock:
            log = self._log_operation(operation, caller=caller)
            self._require_owner(caller, log)
            self._require_phase(operation, expected_phase, log)
            new_phase = expected_phase.next_phase()
            if new_phase is None:
                raise RuntimeError(f"{operation} has no successor phase")

            if on_enter is not None:
                on_enter()
            self._workflow_status = new_phase
            self._transition_history.append(
                WorkflowTransition.create(
                    previous_phase=expected_phase,
                    new_phase=new_phase,
                    triggered_by=caller,
                )
            )
            self._event_emitter.emit(
                WORKFLOW_STATUS_CHANGE_EVENT_TYPE,
                WorkflowStatusChangePayload(
                    previous_status=expected_phase,
                    new_status=new_phase,
                ),
            )
            log.info(
                "workflow_status_changed",
                previous_status=expected_phase.label,
                new_status=new_phase.label,
            )

    def _require_owner(self, caller: str, log: structlog.BoundLogger) -> None:
        if caller != self._owner:
            raise self._reject(
                log, "authorization_failed", NotOwnerError(caller), required="owner"
            )

    def _require_voter(self, caller: str, log: structlog.BoundLogger) -> None:
        if not self._voters.get(caller, UNREGISTERED_VOTER).is_registered:
            raise self._reject(
                log, "authorization_failed", NotVoterError(caller), required="voter"
            )

    def _require_phase(
        self,
        operation: str,
        expected_phase: WorkflowPhase,
        log: structlog.BoundLogger,
    ) -> None:
        if self._workflow_status is not expected_phase:
            raise self._reject(
                log,
                "phase_check_failed",
                PhaseError(operation, expected_phase, self._workflow_status),
                expected_phase=expected_phase.label,
                current_phase=self._workflow_status.label,
            )

    def _require_proposal(self, proposal_id: int, log: structlog.BoundLogger) -> None:
        if not 0 <= proposal_id < len(self._proposals):
            raise self._reject(
                log,
                "proposal_lookup_failed",
                ProposalNotFoundError(proposal_id, len(self._proposals)),
                proposal_count=len(self._proposals),
            )
