from greeter.diagnostics import print_diagnostics
from greeter.handler import GreetingHandler

print_diagnostics()

# The platform serves every path under api/ with the class named "handler".
handler = GreetingHandler
