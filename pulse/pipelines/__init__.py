"""
Founder Pulse Pipelines.

Business logic orchestration functions.
"""

from pulse.pipelines.assessment import *
from pulse.pipelines.journal import *
from pulse.pipelines.community import *
from pulse.pipelines.action_plan import *
from pulse.pipelines.notifications import *
