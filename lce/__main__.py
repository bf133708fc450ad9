from lce.main import main

raise SystemExit(main())
