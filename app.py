#!/usr/bin/env python3

import aws_cdk as cdk

from item_sharing_stack import ItemSharingStack

app = cdk.App()
ItemSharingStack(
    app,
    "ItemSharingStack",
)

app.synth()
