#!/usr/bin/env python3

import aws_cdk as cdk

from reservation_engine_stack import ReservationEngineStack

app = cdk.App()
ReservationEngineStack(
    app,
    "ReservationEngineStack",
)

app.synth()
