"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • La abstracción Predicate y sus resultados (Success / Failure)
   • Tipos puros, inmutables y SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Predicados concretos (is_less_than, is_in_range, ...)
   • Combinadores (or_, and_, not_) y la función check()

✅ Dónde poner lo específico:
   → modules/predicates/domain/

💡 Principio preventivo:
   Si no podrías reusar este código para validar un pago O una edad,
   probablemente NO pertenece a core/.
"""

from tiny_predicates.core.predicate import Failure, Predicate, Result, Success

__all__ = ["Predicate", "Result", "Success", "Failure"]
