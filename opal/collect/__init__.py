"""opal.collect — property sets, error values, Result and unchecked adapters."""

from opal.collect.errors import ArgumentError as ArgumentError
from opal.collect.errors import ErrorCode as ErrorCode
from opal.collect.errors import InvalidArgumentError as InvalidArgumentError
from opal.collect.errors import UncheckedError as UncheckedError
from opal.collect.property_set import PropertySet as PropertySet
from opal.collect.result import Err as Err
from opal.collect.result import Ok as Ok
from opal.collect.result import Result as Result
from opal.collect.result import unwrap as unwrap
from opal.collect.unchecked import checked as checked
from opal.collect.unchecked import unchecked as unchecked
