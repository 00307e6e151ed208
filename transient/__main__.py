from transient.cli import main

raise SystemExit(main())
