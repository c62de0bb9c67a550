"""
Buchberger's Algorithm
Completes a generator set to a Gröbner basis, then reduces it.

Termination: a nonzero remainder joining the basis has a leading monomial
divisible by no current leading monomial, so the leading-term ideal grows
strictly at every such step. Ascending chains of monomial ideals stabilize
(Dickson's lemma), hence only finitely many remainders are ever added and
the pair queue drains. The iteration, size and time budgets below bound
the work in practice, since the basis can grow doubly exponentially.
"""

from typing import Dict, List, Optional, Sequence, Set, Tuple
from concurrent.futures import ThreadPoolExecutor
import logging
import time

from sympy import Symbol

from . import monomial as mono
from .basis import BuchbergerStats, GroebnerBasis
from .monomial_order import MonomialOrder
from .polynomial import Polynomial
from .reduction import reduce
from .s_polynomial import s_polynomial, coprime_leading_monomials
from ..errors import DegenerateInputError, ResourceExceededError

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]

PAIR_SELECTIONS = ("normal", "fifo")


def _pair(i: int, j: int) -> Pair:
    return (i, j) if i < j else (j, i)


def minimalize(polys: Sequence[Polynomial], order: MonomialOrder) -> List[Polynomial]:
    """
    Drop generators whose leading monomial is divisible by another's.
    
    Of several generators sharing a leading monomial only the first is kept.
    """
    candidates = sorted(
        (p for p in polys if not p.is_zero),
        key=lambda p: order.key(p.leading_monomial(order))
    )
    kept: List[Polynomial] = []
    for p in candidates:
        lm = p.leading_monomial(order)
        if not any(mono.divides(q.leading_monomial(order), lm) for q in kept):
            kept.append(p)
    return kept


def interreduce(polys: Sequence[Polynomial], order: MonomialOrder) -> List[Polynomial]:
    """
    Reduce each generator of a minimal basis against the others and make
    it monic. The result is the reduced basis, sorted by descending
    leading monomial.
    """
    polys = list(polys)
    reduced = []
    for i, p in enumerate(polys):
        others = polys[:i] + polys[i + 1:]
        r = reduce(p, others, order) if others else p
        reduced.append(r.monic(order))
    reduced.sort(key=lambda p: order.key(p.leading_monomial(order)), reverse=True)
    return reduced


class BuchbergerEngine:
    """
    Configurable Buchberger completion.
    
    Both pair criteria are optional layers: turning them off never
    changes the reduced basis, only the amount of work.
    
    Example:
        >>> engine = BuchbergerEngine(order=MonomialOrder.LEX)
        >>> basis = engine.compute([f, g])
        >>> basis.contains(f * g)
        True
    """
    
    def __init__(
        self,
        order: MonomialOrder = MonomialOrder.LEX,
        max_iterations: int = 10000,
        max_basis_size: int = 1000,
        timeout: Optional[float] = None,
        use_coprime_criterion: bool = True,
        use_chain_criterion: bool = True,
        pair_selection: str = "normal",
        workers: int = 1
    ):
        """
        Initialize the engine.
        
        Args:
            order: Monomial order of the basis
            max_iterations: Maximum number of pairs taken from the queue
            max_basis_size: Maximum number of generators during completion
            timeout: Optional wall-clock budget in seconds
            use_coprime_criterion: Skip pairs with coprime leading monomials
            use_chain_criterion: Skip pairs covered by two treated pairs
            pair_selection: "normal" (smallest lcm first) or "fifo"
            workers: Threads computing S-polynomials of a batch (1 = inline)
        """
        if pair_selection not in PAIR_SELECTIONS:
            raise ValueError(f"pair_selection must be one of {PAIR_SELECTIONS}, got '{pair_selection}'")
        if max_iterations < 1 or max_basis_size < 1:
            raise ValueError("max_iterations and max_basis_size must be positive")
        if workers < 1:
            raise ValueError("workers must be at least 1")
        
        self.order = MonomialOrder.from_name(order)
        self.max_iterations = max_iterations
        self.max_basis_size = max_basis_size
        self.timeout = timeout
        self.use_coprime_criterion = use_coprime_criterion
        self.use_chain_criterion = use_chain_criterion
        self.pair_selection = pair_selection
        self.workers = workers
    
    def compute(self, generators: Sequence[Polynomial], reduced: bool = True) -> GroebnerBasis:
        """
        Compute a Gröbner basis of the ideal spanned by ``generators``.
        
        Args:
            generators: Polynomials over one common variable tuple
            reduced: Minimalize and interreduce the completed basis
        
        Returns:
            GroebnerBasis (reduced and monic when ``reduced`` is set)
        
        Raises:
            DegenerateInputError: no generators, or mixed variable tuples
            ResourceExceededError: a budget was exhausted
        """
        if not generators:
            raise DegenerateInputError("No generators given", stage="buchberger")
        variables = generators[0].variables
        for idx, g in enumerate(generators):
            if g.variables != variables:
                raise DegenerateInputError(
                    f"Generator over {g.variables} does not match {variables}",
                    stage="buchberger",
                    equation_index=idx
                )
        
        start = time.time()
        stats = BuchbergerStats()
        basis = self._initial_basis(generators)
        if len(basis) > self.max_basis_size:
            raise ResourceExceededError(
                f"{len(basis)} generators exceed max_basis_size={self.max_basis_size}",
                stage="buchberger"
            )
        
        if any(g.is_constant for g in basis):
            logger.debug("Constant generator found, ideal is the whole ring")
            return self._unit_basis(variables, stats, start)
        
        pending: List[Pair] = [
            (i, j) for i in range(len(basis)) for j in range(i + 1, len(basis))
        ]
        in_flight: Set[Pair] = set()
        stats.peak_basis_size = len(basis)
        
        logger.debug(
            f"Buchberger start: {len(basis)} generators, {len(pending)} pairs, "
            f"order={self.order.value}"
        )
        
        while pending:
            batch = self._next_batch(pending, basis)
            in_flight.update(batch)
            precomputed = self._batch_s_polynomials(batch, basis)
            
            for pair in batch:
                self._check_budget(stats, start, len(basis))
                stats.iterations += 1
                in_flight.discard(pair)
                i, j = pair
                
                if self.use_coprime_criterion and coprime_leading_monomials(
                        basis[i], basis[j], self.order):
                    stats.coprime_skips += 1
                    continue
                
                if self.use_chain_criterion and self._chain_criterion(
                        i, j, basis, pending, in_flight):
                    stats.chain_skips += 1
                    continue
                
                s = precomputed.get(pair)
                if s is None:
                    s = s_polynomial(basis[i], basis[j], self.order)
                remainder = reduce(s, basis, self.order)
                stats.reductions += 1
                
                if remainder.is_zero:
                    stats.zero_reductions += 1
                    continue
                
                if remainder.is_constant:
                    logger.debug(f"Pair {pair} reduced to a nonzero constant")
                    return self._unit_basis(variables, stats, start)
                
                new_index = len(basis)
                basis.append(remainder.monic(self.order))
                if len(basis) > self.max_basis_size:
                    raise ResourceExceededError(
                        f"Basis grew beyond max_basis_size={self.max_basis_size}",
                        stage="buchberger"
                    )
                stats.peak_basis_size = max(stats.peak_basis_size, len(basis))
                pending.extend((k, new_index) for k in range(new_index))
        
        if reduced:
            result = interreduce(minimalize(basis, self.order), self.order)
        else:
            result = basis
        
        stats.elapsed = time.time() - start
        logger.info(
            f"Buchberger finished in {stats.elapsed:.3f}s: {len(result)} generators, "
            f"{stats.iterations} pairs, {stats.coprime_skips + stats.chain_skips} skipped"
        )
        return GroebnerBasis(
            generators=result,
            variables=variables,
            order=self.order,
            is_reduced=reduced,
            stats=stats
        )
    
    def _initial_basis(self, generators: Sequence[Polynomial]) -> List[Polynomial]:
        """Nonzero generators with scalar multiples removed."""
        seen = set()
        basis = []
        for g in generators:
            if g.is_zero:
                continue
            key = g.monic(self.order)
            if key in seen:
                continue
            seen.add(key)
            basis.append(g)
        return basis
    
    def _unit_basis(self, variables: Tuple[Symbol, ...], stats: BuchbergerStats, start: float) -> GroebnerBasis:
        stats.elapsed = time.time() - start
        return GroebnerBasis(
            generators=[Polynomial.constant(1, variables)],
            variables=variables,
            order=self.order,
            is_reduced=True,
            stats=stats
        )
    
    def _check_budget(self, stats: BuchbergerStats, start: float, basis_size: int) -> None:
        if stats.iterations >= self.max_iterations:
            raise ResourceExceededError(
                f"Exceeded max_iterations={self.max_iterations} (basis size {basis_size})",
                stage="buchberger"
            )
        if self.timeout is not None and time.time() - start > self.timeout:
            raise ResourceExceededError(
                f"Exceeded timeout of {self.timeout}s after {stats.iterations} iterations",
                stage="buchberger"
            )
    
    def _lcm_key(self, pair: Pair, basis: List[Polynomial]):
        i, j = pair
        lcm = mono.lcm(basis[i].leading_monomial(self.order), basis[j].leading_monomial(self.order))
        return (self.order.key(lcm), pair)
    
    def _next_batch(self, pending: List[Pair], basis: List[Polynomial]) -> List[Pair]:
        """Remove and return the next pairs to treat, in treatment order."""
        size = min(self.workers, len(pending))
        if self.pair_selection == "fifo":
            batch = pending[:size]
            del pending[:size]
            return batch
        batch = []
        for _ in range(size):
            best = min(range(len(pending)), key=lambda k: self._lcm_key(pending[k], basis))
            batch.append(pending.pop(best))
        return batch
    
    def _batch_s_polynomials(self, batch: List[Pair], basis: List[Polynomial]) -> Dict[Pair, Polynomial]:
        """S-polynomials for a multi-pair batch, computed on a thread pool."""
        if self.workers == 1 or len(batch) < 2:
            return {}
        wanted = [
            (i, j) for i, j in batch
            if not (self.use_coprime_criterion
                    and coprime_leading_monomials(basis[i], basis[j], self.order))
        ]
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = {
                pair: executor.submit(s_polynomial, basis[pair[0]], basis[pair[1]], self.order)
                for pair in wanted
            }
            return {pair: future.result() for pair, future in futures.items()}
    
    def _chain_criterion(
        self,
        i: int,
        j: int,
        basis: List[Polynomial],
        pending: List[Pair],
        in_flight: Set[Pair]
    ) -> bool:
        """
        Buchberger's second criterion: skip (i, j) if some k has LM(k)
        dividing lcm(LM(i), LM(j)) and both (i, k) and (j, k) are treated.
        """
        lcm = mono.lcm(basis[i].leading_monomial(self.order), basis[j].leading_monomial(self.order))
        open_pairs = set(pending) | in_flight
        for k in range(len(basis)):
            if k == i or k == j:
                continue
            if not mono.divides(basis[k].leading_monomial(self.order), lcm):
                continue
            if _pair(i, k) not in open_pairs and _pair(j, k) not in open_pairs:
                return True
        return False


def groebner(
    generators: Sequence[Polynomial],
    order: MonomialOrder = MonomialOrder.LEX,
    **engine_options
) -> GroebnerBasis:
    """Reduced Gröbner basis of ``generators`` with a one-off engine."""
    return BuchbergerEngine(order=order, **engine_options).compute(generators)
