from . import products, subscriptions

# Sections registered by init_catalog(), in registration order.
BUILTIN_SECTIONS = (products, subscriptions)
